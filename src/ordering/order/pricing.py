"""Order pricing: subtotal, discount cap, and tax.

Tax is applied after the discount:

    total = (unit_price * quantity - discount) * (1 + tax_rate)

Amounts are kept as exact ``Decimal`` values; nothing is rounded here so the
total is always the discounted subtotal scaled by exactly the tax multiplier.
"""

from dataclasses import dataclass
from decimal import Decimal

from ordering.config import OrderingSettings
from shared.exceptions import InvalidOperationError


def to_money(value) -> Decimal:
    """Coerce ints, floats and strings to ``Decimal`` via their text form."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class OrderPricing:
    """Financial summary of an order."""

    subtotal: Decimal
    discount_amount: Decimal
    tax_amount: Decimal
    total_price: Decimal


def compute_pricing(
    unit_price: Decimal,
    quantity: int,
    discount_amount: Decimal,
    settings: OrderingSettings,
) -> OrderPricing:
    subtotal = unit_price * quantity
    discount_amount = to_money(discount_amount)

    if discount_amount < 0:
        raise InvalidOperationError("Discount must not be negative.")
    if discount_amount > subtotal * settings.max_discount_ratio:
        raise InvalidOperationError("Discount too large.")

    discounted = subtotal - discount_amount
    return OrderPricing(
        subtotal=subtotal,
        discount_amount=discount_amount,
        tax_amount=discounted * settings.tax_rate,
        total_price=discounted * settings.tax_multiplier,
    )
