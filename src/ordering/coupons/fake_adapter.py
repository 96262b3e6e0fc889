"""Fake discount adapter — a static table of coupon codes.

Unknown codes are not an error here: they resolve to no discount.
"""

from decimal import Decimal

import structlog

from ordering.coupons.port import DiscountPort

logger = structlog.get_logger(__name__)


class FakeDiscounts(DiscountPort):
    def __init__(self, codes: dict[str, Decimal] | None = None):
        self.codes: dict[str, Decimal] = {}
        self.lookups: list[str] = []
        for code, amount in (codes or {}).items():
            self.register(code, amount)

    def register(self, code: str, amount) -> None:
        self.codes[code] = Decimal(str(amount))

    def validate_code(self, code: str) -> Decimal:
        self.lookups.append(code)
        amount = self.codes.get(code)
        if amount is None:
            logger.warning("Unknown discount code, applying no discount", code=code)
            return Decimal(0)
        return amount

    def reset(self) -> None:
        self.codes.clear()
        self.lookups.clear()
