"""Payment gateway port (abstract interface).

Defines the contract the ordering service uses to settle an order. This
enables swapping between FakeGateway (dev/test) and a real processor
without changing any domain or application code.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ordering.order.order import Order


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    def process_payment(self, order: "Order") -> bool:
        """Charge the order's total. Returns False when the charge is declined."""
        ...

    @abstractmethod
    def needs_manual_approval(self, order: "Order") -> bool:
        """Whether settlement must wait for a human review."""
        ...
