"""Fake notifier — records order notifications for testing."""

from typing import TYPE_CHECKING
from uuid import uuid4

from notifications.channel.port import NotificationPort

if TYPE_CHECKING:
    from ordering.order.order import Order


class FakeNotifier(NotificationPort):
    """Notifier that records messages in memory for test assertions."""

    def __init__(self):
        self.sent_messages: list[dict] = []

    def _record(self, kind: str, order: "Order", subject: str) -> None:
        self.sent_messages.append(
            {
                "message_id": f"note-{uuid4().hex[:12]}",
                "kind": kind,
                "order_id": order.id,
                "state": order.state.value,
                "subject": subject,
            }
        )

    def send_pending_approval(self, order: "Order") -> None:
        self._record("pending_approval", order, f"Order #{order.id} is awaiting approval")

    def send_paid_confirmation(self, order: "Order") -> None:
        self._record("paid_confirmation", order, f"Order #{order.id} is confirmed")

    def reset(self):
        """Clear sent messages (useful between tests)."""
        self.sent_messages.clear()
