"""Order Routes — place, read and cancel orders.

Invariants:
    - POST /orders for an unknown customer returns 404 and leaves stock untouched
    - POST /orders/{id}/cancel restocks the order's lines and removes the order;
      a second cancel of the same id returns 404
"""

from fastapi import APIRouter, Depends, status

from storefront.api.dependencies import get_store, found_or_404
from storefront.core.domain_types import EntityKind
from storefront.core.store import CommerceStore
from storefront.schemas.common import DeletedResponse
from storefront.schemas.orders import OrderCreate, OrderResponse

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post(
    "", response_model=OrderResponse, status_code=status.HTTP_201_CREATED,
)
async def create_order(body: OrderCreate, store: CommerceStore = Depends(get_store)):
    order = found_or_404(
        store.create_order(body.customer_id, [line.to_line() for line in body.lines]),
        EntityKind.CUSTOMER, body.customer_id, "create_order",
    )
    return OrderResponse.from_record(order)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str, store: CommerceStore = Depends(get_store)):
    order = found_or_404(store.get_order(order_id), EntityKind.ORDER, order_id, "get")
    return OrderResponse.from_record(order)


@router.post("/{order_id}/cancel", response_model=DeletedResponse)
async def cancel_order(order_id: str, store: CommerceStore = Depends(get_store)):
    cancelled = found_or_404(
        store.cancel_order(order_id), EntityKind.ORDER, order_id, "cancel",
    )
    return DeletedResponse(id=cancelled)
