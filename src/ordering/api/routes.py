"""FastAPI routes for the Ordering domain."""

from fastapi import APIRouter

from ordering.api.schemas import (
    CancelResponse,
    CreateOrderRequest,
    OrderResponse,
    UpdateOrderQuantityRequest,
    UpdateResponse,
)
from ordering.domain import get_order_service

order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(body: CreateOrderRequest) -> OrderResponse:
    order = get_order_service().create_order(
        product_name=body.product_name,
        quantity=body.quantity,
        unit_price=body.unit_price,
        priority=body.priority,
        discount_code=body.discount_code,
    )
    return OrderResponse.from_order(order)


@order_router.get("/audit-log", response_model=list[OrderResponse])
async def get_audit_log() -> list[OrderResponse]:
    return [OrderResponse.from_order(order) for order in get_order_service().get_audit_log()]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int) -> OrderResponse:
    return OrderResponse.from_order(get_order_service().get_order(order_id))


@order_router.put("/{order_id}/quantity", response_model=UpdateResponse)
async def update_order_quantity(order_id: int, body: UpdateOrderQuantityRequest) -> UpdateResponse:
    updated = get_order_service().update_order(order_id, body.new_quantity)
    return UpdateResponse(updated=updated)


@order_router.put("/{order_id}/cancel", response_model=CancelResponse)
async def cancel_order(order_id: int) -> CancelResponse:
    cancelled = get_order_service().cancel_order(order_id)
    return CancelResponse(cancelled=cancelled)
