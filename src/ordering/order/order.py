"""Order entity — the core of the ordering domain.

An order is priced once at creation (and again on quantity updates) and then
moves through a small state machine:

State Machine:
    CREATED → PENDING_APPROVAL → PAID → SHIPPED
    CREATED → PAID → SHIPPED
    CANCELLED (from CREATED, PENDING_APPROVAL, PAID)

SHIPPED is set by fulfillment outside the ordering service. SHIPPED and
CANCELLED are terminal.
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal, InvalidOperation
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ordering.config import OrderingSettings
from ordering.order.pricing import OrderPricing, to_money
from shared.exceptions import ValidationError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderState(str, Enum):
    CREATED = "Created"
    PENDING_APPROVAL = "PendingApproval"
    PAID = "Paid"
    CANCELLED = "Cancelled"
    SHIPPED = "Shipped"


class Priority(str, Enum):
    LOW = "Low"
    NORMAL = "Normal"
    HIGH = "High"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderState.CREATED: {OrderState.PENDING_APPROVAL, OrderState.PAID, OrderState.CANCELLED},
    OrderState.PENDING_APPROVAL: {OrderState.PAID, OrderState.SHIPPED, OrderState.CANCELLED},
    OrderState.PAID: {OrderState.SHIPPED, OrderState.CANCELLED},
    OrderState.SHIPPED: set(),  # Terminal
    OrderState.CANCELLED: set(),  # Terminal
}

# States from which cancellation is refused
_NON_CANCELLABLE_STATES = {OrderState.SHIPPED, OrderState.CANCELLED}


# ---------------------------------------------------------------------------
# Validation rules
# ---------------------------------------------------------------------------
def validate_product_name(product_name: str, settings: OrderingSettings) -> None:
    if product_name is None or len(product_name) < settings.min_product_name_length:
        raise ValidationError.for_field("product_name", "Product name is too short.")


def validate_quantity(quantity: int, settings: OrderingSettings) -> None:
    if quantity <= 0:
        raise ValidationError.for_field("quantity", "Quantity must be positive.")
    if quantity > settings.max_quantity:
        raise ValidationError.for_field(
            "quantity",
            f"Quantity exceeds max limit of {settings.max_quantity}.",
        )


def parse_priority(priority: str | Priority) -> Priority:
    if isinstance(priority, Priority):
        return priority
    try:
        return Priority(priority)
    except ValueError:
        allowed = ", ".join(p.value for p in Priority)
        raise ValidationError.for_field(
            "priority",
            f"Invalid priority '{priority}'. Must be one of: {allowed}.",
        ) from None


def parse_unit_price(unit_price) -> Decimal:
    try:
        parsed = to_money(unit_price)
    except InvalidOperation:
        raise ValidationError.for_field("unit_price", "Unit price must be a number.") from None
    if not parsed.is_finite():
        raise ValidationError.for_field("unit_price", "Unit price must be a number.")
    if parsed <= 0:
        raise ValidationError.for_field("unit_price", "Unit price must be positive.")
    return parsed


def validate_order_request(
    product_name: str,
    quantity: int,
    unit_price,
    priority: str | Priority,
    settings: OrderingSettings,
) -> tuple[Priority, Decimal]:
    """Apply the input rules in order, failing on the first violation.

    Returns the parsed priority and unit price.
    """
    validate_product_name(product_name, settings)
    validate_quantity(quantity, settings)
    parsed_priority = parse_priority(priority)
    parsed_price = parse_unit_price(unit_price)
    return parsed_priority, parsed_price


# ---------------------------------------------------------------------------
# Entity
# ---------------------------------------------------------------------------
class Order(BaseModel):
    """A single-product retail order.

    ``id`` stays ``None`` until the order is stored; the store hands out
    sequential ids starting at 1.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int | None = None
    product_name: str
    quantity: int
    unit_price: Decimal
    priority: Priority = Priority.NORMAL
    discount_code: str | None = None
    discount_amount: Decimal = Decimal(0)
    tax_amount: Decimal = Decimal(0)
    total_price: Decimal = Decimal(0)
    state: OrderState = OrderState.CREATED
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime | None = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value):
        # Naive timestamps are treated as UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity

    @property
    def is_terminal(self) -> bool:
        return not _VALID_TRANSITIONS[self.state]

    def can_be_cancelled(self) -> bool:
        return self.state not in _NON_CANCELLABLE_STATES

    def is_older_than(self, days: int, now: datetime) -> bool:
        return now - self.created_at > timedelta(days=days)

    def transition_to(self, new_state: OrderState) -> None:
        if new_state not in _VALID_TRANSITIONS[self.state]:
            raise ValidationError.for_field(
                "state",
                f"Cannot transition from {self.state.value} to {new_state.value}",
            )
        self.state = new_state

    def mark_pending_approval(self) -> None:
        self.transition_to(OrderState.PENDING_APPROVAL)

    def mark_paid(self) -> None:
        self.transition_to(OrderState.PAID)

    def ship(self) -> None:
        self.transition_to(OrderState.SHIPPED)

    def cancel(self) -> None:
        self.transition_to(OrderState.CANCELLED)

    def apply_pricing(self, pricing: OrderPricing) -> None:
        self.discount_amount = pricing.discount_amount
        self.tax_amount = pricing.tax_amount
        self.total_price = pricing.total_price
