"""Ordering bounded context — order lifecycle.

Composition root: wires the process-wide OrderService from the configured
inventory, payment, notification and discount adapters.
"""

from inventory.stock import get_inventory
from notifications.channel import get_notifier
from ordering.config import OrderingSettings
from ordering.coupons import get_discounts
from ordering.order.service import OrderService
from ordering.utils.logging import configure_logging, get_logger
from payments.gateway import get_gateway

settings = OrderingSettings.from_env()

# Configure logging for the application
configure_logging(level=settings.log_level, json=settings.log_json)

logger = get_logger(__name__)

_order_service: OrderService | None = None


def get_order_service() -> OrderService:
    """Return the shared OrderService, building it on first use."""
    global _order_service
    if _order_service is None:
        _order_service = OrderService(
            inventory=get_inventory(),
            payments=get_gateway(),
            notifications=get_notifier(),
            discounts=get_discounts(),
            settings=settings,
        )
        logger.info("Order service initialized", environment=settings.environment)
    return _order_service


def reset_order_service() -> None:
    """Drop the shared OrderService and its store (useful for testing)."""
    global _order_service
    _order_service = None
