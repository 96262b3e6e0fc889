"""Discount adapter registry.

Provides get_discounts() / set_discounts() to swap implementations.
DISCOUNT_ADAPTER selects the adapter; only "fake" ships with the project.
"""

import os

from ordering.coupons.port import DiscountPort

_current_discounts: DiscountPort | None = None


def get_discounts() -> DiscountPort:
    """Return the current discount adapter. Defaults to FakeDiscounts."""
    global _current_discounts
    if _current_discounts is None:
        adapter = os.environ.get("DISCOUNT_ADAPTER", "fake")
        if adapter == "fake":
            from ordering.coupons.fake_adapter import FakeDiscounts

            _current_discounts = FakeDiscounts()
        else:
            raise ValueError(f"Unknown discount adapter: {adapter}")
    return _current_discounts


def set_discounts(discounts: DiscountPort) -> None:
    """Override the active discount adapter (useful for tests)."""
    global _current_discounts
    _current_discounts = discounts


def reset_discounts() -> None:
    global _current_discounts
    _current_discounts = None
