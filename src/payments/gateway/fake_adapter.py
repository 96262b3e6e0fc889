"""Configurable fake payment gateway for development and testing.

This adapter simulates a payment processor without any external calls.
It can be configured at runtime to decline charges, and to flag orders at or
above a total for manual review, making it useful for:
- Manual API testing without real gateway credentials
- Automated tests with predictable outcomes
"""

from decimal import Decimal
from typing import TYPE_CHECKING

from payments.gateway.port import PaymentGateway

if TYPE_CHECKING:
    from ordering.order.order import Order


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.manual_approval_threshold: Decimal | None = None
        self.calls: list[dict] = []

    def configure(
        self,
        should_succeed: bool = True,
        manual_approval_threshold: Decimal | None = None,
    ) -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.manual_approval_threshold = (
            Decimal(str(manual_approval_threshold)) if manual_approval_threshold is not None else None
        )

    def process_payment(self, order: "Order") -> bool:
        self.calls.append(
            {
                "method": "process_payment",
                "product_name": order.product_name,
                "amount": order.total_price,
            }
        )
        return self.should_succeed

    def needs_manual_approval(self, order: "Order") -> bool:
        self.calls.append(
            {
                "method": "needs_manual_approval",
                "product_name": order.product_name,
                "amount": order.total_price,
            }
        )
        if self.manual_approval_threshold is None:
            return False
        return order.total_price >= self.manual_approval_threshold

    def reset(self) -> None:
        self.calls.clear()
        self.should_succeed = True
        self.manual_approval_threshold = None
