"""Notification adapter registry — pluggable order notification dispatch.

Uses the fake notifier by default; real adapters (SendGrid, Twilio, ...)
can be selected via the NOTIFICATION_ADAPTER environment variable.
"""

import os

from notifications.channel.port import NotificationPort

_notifier_instance: NotificationPort | None = None


def get_notifier() -> NotificationPort:
    """Return the configured notification adapter (singleton)."""
    global _notifier_instance
    if _notifier_instance is None:
        adapter = os.environ.get("NOTIFICATION_ADAPTER", "fake")
        if adapter == "fake":
            from notifications.channel.fake_notifier import FakeNotifier

            _notifier_instance = FakeNotifier()
        else:
            raise ValueError(f"Unknown notification adapter: {adapter}")
    return _notifier_instance


def set_notifier(notifier: NotificationPort) -> None:
    """Override the active notifier (useful for tests)."""
    global _notifier_instance
    _notifier_instance = notifier


def reset_notifier() -> None:
    """Reset the notifier singleton (useful for testing)."""
    global _notifier_instance
    _notifier_instance = None
