"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from the
internal Order entity. Input rules (name length, quantity bounds, priority)
are enforced by the service so the API reports the same messages.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel

from ordering.order.order import Order


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateOrderRequest(BaseModel):
    product_name: str
    quantity: int
    unit_price: Decimal
    priority: str = "Normal"
    discount_code: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_name": "Laptop",
                    "quantity": 2,
                    "unit_price": "999.00",
                    "priority": "High",
                    "discount_code": "WELCOME10",
                }
            ]
        }
    }


class UpdateOrderQuantityRequest(BaseModel):
    new_quantity: int


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderResponse(BaseModel):
    id: int
    product_name: str
    quantity: int
    unit_price: Decimal
    priority: str
    discount_code: str | None = None
    subtotal: Decimal
    discount_amount: Decimal
    tax_amount: Decimal
    total_price: Decimal
    state: str
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            product_name=order.product_name,
            quantity=order.quantity,
            unit_price=order.unit_price,
            priority=order.priority.value,
            discount_code=order.discount_code,
            subtotal=order.subtotal,
            discount_amount=order.discount_amount,
            tax_amount=order.tax_amount,
            total_price=order.total_price,
            state=order.state.value,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class UpdateResponse(BaseModel):
    updated: bool


class CancelResponse(BaseModel):
    cancelled: bool
