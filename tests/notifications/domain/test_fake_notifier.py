"""Tests for the fake notifier — records order notifications."""

import pytest
from notifications.channel import get_notifier, reset_notifier, set_notifier
from notifications.channel.fake_notifier import FakeNotifier
from ordering.order.order import Order


def _make_order(order_id=7):
    order = Order(id=order_id, product_name="Laptop", quantity=1, unit_price="100")
    order.mark_paid()
    return order


class TestFakeNotifier:
    def setup_method(self):
        self.notifier = FakeNotifier()

    def test_paid_confirmation_is_recorded(self):
        self.notifier.send_paid_confirmation(_make_order())
        (message,) = self.notifier.sent_messages
        assert message["kind"] == "paid_confirmation"
        assert message["order_id"] == 7
        assert message["state"] == "Paid"
        assert message["message_id"].startswith("note-")

    def test_pending_approval_is_recorded(self):
        order = Order(id=3, product_name="Laptop", quantity=1, unit_price="100")
        order.mark_pending_approval()
        self.notifier.send_pending_approval(order)
        assert self.notifier.sent_messages[0]["kind"] == "pending_approval"
        assert "#3" in self.notifier.sent_messages[0]["subject"]

    def test_reset(self):
        self.notifier.send_paid_confirmation(_make_order())
        self.notifier.reset()
        assert self.notifier.sent_messages == []


class TestNotifierRegistry:
    def test_defaults_to_fake(self):
        assert isinstance(get_notifier(), FakeNotifier)

    def test_set_and_reset(self):
        custom = FakeNotifier()
        set_notifier(custom)
        assert get_notifier() is custom
        reset_notifier()
        assert get_notifier() is not custom

    def test_unknown_adapter(self, monkeypatch):
        monkeypatch.setenv("NOTIFICATION_ADAPTER", "pigeon")
        with pytest.raises(ValueError, match="Unknown notification adapter"):
            get_notifier()
