"""Discount port — resolves a discount code to a monetary amount."""

from abc import ABC, abstractmethod
from decimal import Decimal


class DiscountPort(ABC):
    """Abstract interface for discount code lookups."""

    @abstractmethod
    def validate_code(self, code: str) -> Decimal:
        """Return the amount to subtract from the subtotal for ``code``."""
        ...
