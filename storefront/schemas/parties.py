"""Party Schemas — customers and sellers at the API boundary.

Invariants:
    - name and email are non-empty; email must look like local@domain
    - CustomerResponse.orders lists the customer's active orders as summaries
      (an order's own customer field is a snapshot, so nesting stops here)
"""

from pydantic import BaseModel, Field

from storefront.core.records import Customer, Seller, Order
from storefront.schemas.orders import OrderSummary

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+$"


class CustomerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(max_length=320, pattern=EMAIL_PATTERN)
    address: str | None = Field(None, max_length=1000)


class CustomerResponse(BaseModel):
    id: str
    name: str
    email: str
    address: str | None
    orders: list[OrderSummary] = []

    @classmethod
    def from_record(
        cls, customer: Customer, orders: list[Order] | None = None,
    ) -> "CustomerResponse":
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            address=customer.address,
            orders=[OrderSummary.from_record(o) for o in orders or []],
        )


class SellerCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(max_length=320, pattern=EMAIL_PATTERN)


class SellerResponse(BaseModel):
    id: str
    name: str
    email: str

    @classmethod
    def from_record(cls, seller: Seller) -> "SellerResponse":
        return cls(id=seller.id, name=seller.name, email=seller.email)
