"""Order Schemas — order placement and order views at the API boundary.

Invariants:
    - Each line's quantity is a positive integer
    - Line references are NOT checked against the catalog here or in the store;
      unknown product/variant pairs are accepted and kept on the order
    - OrderResponse.customer is the snapshot captured when the order was placed

Design Decisions:
    - "products" accepted as an alias of "lines"
"""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from storefront.core.domain_types import ProductId, VariantId
from storefront.core.records import Customer, Order, OrderLine


class OrderLineInput(BaseModel):
    product_id: str = Field(min_length=1)
    variant_id: str = Field(min_length=1)
    quantity: int = Field(ge=1)

    def to_line(self) -> OrderLine:
        return OrderLine(
            product_id=ProductId(self.product_id),
            variant_id=VariantId(self.variant_id),
            quantity=self.quantity,
        )


class OrderCreate(BaseModel):
    customer_id: str = Field(min_length=1)
    lines: list[OrderLineInput] = Field(
        validation_alias=AliasChoices("lines", "products"),
    )


class OrderLineResponse(BaseModel):
    product_id: str
    variant_id: str
    quantity: int


class CustomerSnapshot(BaseModel):
    id: str
    name: str
    email: str
    address: str | None

    @classmethod
    def from_record(cls, customer: Customer) -> "CustomerSnapshot":
        return cls(
            id=customer.id, name=customer.name,
            email=customer.email, address=customer.address,
        )


class OrderSummary(BaseModel):
    """Order without its customer — used when listed under a customer."""
    id: str
    created_at: datetime
    lines: list[OrderLineResponse]

    @classmethod
    def from_record(cls, order: Order) -> "OrderSummary":
        return cls(
            id=order.id,
            created_at=order.created_at,
            lines=[_line(line) for line in order.lines],
        )


class OrderResponse(BaseModel):
    id: str
    created_at: datetime
    customer: CustomerSnapshot
    lines: list[OrderLineResponse]

    @classmethod
    def from_record(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            created_at=order.created_at,
            customer=CustomerSnapshot.from_record(order.customer),
            lines=[_line(line) for line in order.lines],
        )


def _line(line: OrderLine) -> OrderLineResponse:
    return OrderLineResponse(
        product_id=line.product_id,
        variant_id=line.variant_id,
        quantity=line.quantity,
    )
