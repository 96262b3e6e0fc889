"""Order service — creation, quantity updates and cancellation.

Creation runs one synchronous path:

    validate → price → acquire stock → pay → resolve state → store → notify

High-priority orders reserve stock up front; other priorities only check
availability. When payment fails for a High order, or either gateway call
raises, the reservation is released before the error surfaces, so a failed
order never holds stock. Orders are stored (and receive their id) only once
payment has succeeded.

Stale updates, updates to shipped or cancelled orders, and cancelling a
shipped or already cancelled order are ordinary outcomes. They come back as
``False`` rather than as exceptions.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from decimal import Decimal

import structlog

from inventory.stock.port import InventoryPort
from notifications.channel.port import NotificationPort
from ordering.config import OrderingSettings
from ordering.coupons.port import DiscountPort
from ordering.order.order import (
    Order,
    OrderState,
    Priority,
    validate_order_request,
    validate_quantity,
)
from ordering.order.pricing import compute_pricing, to_money
from ordering.order.store import OrderStore
from payments.gateway.port import PaymentGateway
from shared.exceptions import InvalidOperationError

logger = structlog.get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class OrderService:
    def __init__(
        self,
        inventory: InventoryPort,
        payments: PaymentGateway,
        notifications: NotificationPort,
        discounts: DiscountPort,
        store: OrderStore | None = None,
        settings: OrderingSettings | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._inventory = inventory
        self._payments = payments
        self._notifications = notifications
        self._discounts = discounts
        self._store = store if store is not None else OrderStore()
        self._settings = settings if settings is not None else OrderingSettings()
        self._clock = clock

    # -------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------
    def create_order(
        self,
        product_name: str,
        quantity: int,
        unit_price,
        priority: str | Priority = Priority.NORMAL.value,
        discount_code: str | None = None,
    ) -> Order:
        """Validate, price, reserve or check stock, pay, then store the order.

        Raises:
            ValidationError: malformed input; no collaborator has been called.
            InvalidOperationError: discount too large, out of stock, or
                payment failed. Nothing is stored and no id is consumed.
        """
        with self._store.lock:
            parsed_priority, unit_price = validate_order_request(
                product_name, quantity, unit_price, priority, self._settings
            )

            discount_amount = self._resolve_discount(discount_code)
            pricing = compute_pricing(unit_price, quantity, discount_amount, self._settings)

            order = Order(
                product_name=product_name,
                quantity=quantity,
                unit_price=unit_price,
                priority=parsed_priority,
                discount_code=discount_code,
                created_at=self._clock(),
            )
            order.apply_pricing(pricing)

            self._acquire_stock(order)
            self._settle_payment(order)

            self._store.add(order)
            self._notify(order)

        logger.info(
            "Order created",
            order_id=order.id,
            product_name=order.product_name,
            quantity=order.quantity,
            priority=order.priority.value,
            total_price=str(order.total_price),
            state=order.state.value,
        )
        return order

    def _resolve_discount(self, discount_code: str | None) -> Decimal:
        if not discount_code:
            return Decimal(0)
        return to_money(self._discounts.validate_code(discount_code))

    def _acquire_stock(self, order: Order) -> None:
        if order.priority is Priority.HIGH:
            available = self._inventory.reserve_stock(order.product_name, order.quantity)
        else:
            available = self._inventory.check_stock(order.product_name, order.quantity)

        if not available:
            logger.warning(
                "Insufficient stock",
                product_name=order.product_name,
                quantity=order.quantity,
                priority=order.priority.value,
            )
            raise InvalidOperationError("Out of stock.")

    def _settle_payment(self, order: Order) -> None:
        holds_reservation = order.priority is Priority.HIGH
        manual_approval = False

        try:
            paid = self._payments.process_payment(order)
            if paid:
                manual_approval = self._payments.needs_manual_approval(order)
        except Exception:
            if holds_reservation:
                self._release_reservation(order)
            raise

        if not paid:
            if holds_reservation:
                self._release_reservation(order)
            logger.warning(
                "Payment failed",
                product_name=order.product_name,
                total_price=str(order.total_price),
            )
            raise InvalidOperationError("Payment failed.")

        if manual_approval:
            order.mark_pending_approval()
        else:
            order.mark_paid()

    def _release_reservation(self, order: Order) -> None:
        self._inventory.release_reserved_stock(order.product_name, order.quantity)
        logger.info(
            "Reservation released",
            product_name=order.product_name,
            quantity=order.quantity,
        )

    def _notify(self, order: Order) -> None:
        if order.state is OrderState.PENDING_APPROVAL:
            self._notifications.send_pending_approval(order)
        else:
            self._notifications.send_paid_confirmation(order)

    # -------------------------------------------------------------------
    # Post-creation operations
    # -------------------------------------------------------------------
    def update_order(self, order_id: int, new_quantity: int) -> bool:
        """Change the quantity of a recent order and reprice it.

        Returns False, without touching the order, once it is older than the
        update window or has reached a terminal state.
        """
        with self._store.lock:
            order = self._store.get(order_id)
            now = self._clock()

            if order.is_terminal:
                logger.info(
                    "Order is closed for updates",
                    order_id=order_id,
                    state=order.state.value,
                )
                return False

            if order.is_older_than(self._settings.update_window_days, now):
                logger.info(
                    "Order too old to update",
                    order_id=order_id,
                    created_at=order.created_at.isoformat(),
                )
                return False

            validate_quantity(new_quantity, self._settings)
            pricing = compute_pricing(order.unit_price, new_quantity, order.discount_amount, self._settings)

            order.quantity = new_quantity
            order.apply_pricing(pricing)
            order.updated_at = now

        logger.info("Order updated", order_id=order_id, quantity=new_quantity)
        return True

    def cancel_order(self, order_id: int) -> bool:
        with self._store.lock:
            order = self._store.get(order_id)

            if not order.can_be_cancelled():
                logger.info(
                    "Cancellation rejected",
                    order_id=order_id,
                    state=order.state.value,
                )
                return False

            order.cancel()
            self._store.record_cancellation(order)

        logger.info("Order cancelled", order_id=order_id)
        return True

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def get_order(self, order_id: int) -> Order:
        return self._store.get(order_id)

    def get_audit_log(self) -> list[Order]:
        return self._store.audit_log()
