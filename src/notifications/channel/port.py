"""Notification port — abstract interface for order state-change messages."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ordering.order.order import Order


class NotificationPort(ABC):
    """Abstract interface for notification dispatch adapters."""

    @abstractmethod
    def send_pending_approval(self, order: "Order") -> None:
        """Tell the customer their order is waiting for manual review."""
        ...

    @abstractmethod
    def send_paid_confirmation(self, order: "Order") -> None:
        """Tell the customer their order has been paid."""
        ...
