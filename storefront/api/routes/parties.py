"""Customer & Seller Routes — registration and lookup.

Invariants:
    - Sellers are stored in the seller collection, never among customers
    - A customer's orders are its active orders; cancelled orders are gone
"""

from fastapi import APIRouter, Depends, status

from storefront.api.dependencies import get_store, found_or_404
from storefront.core.domain_types import EntityKind
from storefront.core.store import CommerceStore
from storefront.schemas.orders import OrderSummary
from storefront.schemas.parties import (
    CustomerCreate, CustomerResponse, SellerCreate, SellerResponse,
)

customers_router = APIRouter(prefix="/customers", tags=["customers"])
sellers_router = APIRouter(prefix="/sellers", tags=["sellers"])


@customers_router.post(
    "", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED,
)
async def add_customer(
    body: CustomerCreate, store: CommerceStore = Depends(get_store),
):
    customer = store.add_customer(
        name=body.name, email=body.email, address=body.address,
    )
    return CustomerResponse.from_record(customer)


@customers_router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: str, store: CommerceStore = Depends(get_store)):
    customer = found_or_404(
        store.get_customer(customer_id), EntityKind.CUSTOMER, customer_id, "get",
    )
    return CustomerResponse.from_record(customer, store.orders_of(customer_id))


@customers_router.get("/{customer_id}/orders", response_model=list[OrderSummary])
async def list_customer_orders(
    customer_id: str, store: CommerceStore = Depends(get_store),
):
    orders = found_or_404(
        store.orders_of(customer_id), EntityKind.CUSTOMER, customer_id, "list_orders",
    )
    return [OrderSummary.from_record(o) for o in orders]


@sellers_router.post(
    "", response_model=SellerResponse, status_code=status.HTTP_201_CREATED,
)
async def add_seller(body: SellerCreate, store: CommerceStore = Depends(get_store)):
    seller = store.add_seller(name=body.name, email=body.email)
    return SellerResponse.from_record(seller)


@sellers_router.get("/{seller_id}", response_model=SellerResponse)
async def get_seller(seller_id: str, store: CommerceStore = Depends(get_store)):
    seller = found_or_404(
        store.get_seller(seller_id), EntityKind.SELLER, seller_id, "get",
    )
    return SellerResponse.from_record(seller)
