"""In-memory order store owned by the ordering service.

Holds the orders by id, the next-id counter and the cancellation audit log.
Every service operation runs under ``lock`` so that id assignment and
insertion happen together.
"""

import threading

from ordering.order.order import Order
from shared.exceptions import ObjectNotFoundError


class OrderStore:
    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._orders: dict[int, Order] = {}
        self._next_id = 1
        self._audit_log: list[Order] = []

    def add(self, order: Order) -> Order:
        """Assign the next sequential id to ``order`` and store it."""
        with self.lock:
            order.id = self._next_id
            self._next_id += 1
            self._orders[order.id] = order
        return order

    def get(self, order_id: int) -> Order:
        try:
            return self._orders[order_id]
        except KeyError:
            raise ObjectNotFoundError(f"Order {order_id} does not exist") from None

    def record_cancellation(self, order: Order) -> None:
        with self.lock:
            self._audit_log.append(order)

    def audit_log(self) -> list[Order]:
        return list(self._audit_log)
