"""Ordering settings, loaded from environment variables.

Defaults encode the house rules: product names of at least 3 characters,
at most 100 units per order, discounts capped at 30 % of the subtotal, a
flat 20 % tax applied after discount, and a 30-day window for updates.
"""

import os
from dataclasses import dataclass
from decimal import Decimal


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class OrderingSettings:
    min_product_name_length: int = 3
    max_quantity: int = 100
    max_discount_ratio: Decimal = Decimal("0.30")
    tax_rate: Decimal = Decimal("0.20")
    update_window_days: int = 30
    environment: str = "development"
    log_level: str = "INFO"
    log_json: bool = False

    @property
    def tax_multiplier(self) -> Decimal:
        return Decimal(1) + self.tax_rate

    @classmethod
    def from_env(cls) -> "OrderingSettings":
        return cls(
            min_product_name_length=int(os.getenv("ORDERING_MIN_PRODUCT_NAME_LENGTH", "3")),
            max_quantity=int(os.getenv("ORDERING_MAX_QUANTITY", "100")),
            max_discount_ratio=Decimal(os.getenv("ORDERING_MAX_DISCOUNT_RATIO", "0.30")),
            tax_rate=Decimal(os.getenv("ORDERING_TAX_RATE", "0.20")),
            update_window_days=int(os.getenv("ORDERING_UPDATE_WINDOW_DAYS", "30")),
            environment=os.getenv("ORDERING_ENV", "development"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_json=_env_bool("LOG_JSON", False),
        )
