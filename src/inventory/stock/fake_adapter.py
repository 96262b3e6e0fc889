"""Fake inventory adapter — in-memory stock levels for development and testing.

Stock Level Model:
    on_hand:   Units known for the product
    reserved:  Held for orders
    available: on_hand - reserved
"""

from inventory.stock.port import InventoryPort


class FakeInventory(InventoryPort):
    """Inventory adapter that tracks stock and reservations in memory."""

    def __init__(self, stock: dict[str, int] | None = None):
        self.on_hand: dict[str, int] = dict(stock or {})
        self.reserved: dict[str, int] = {}
        self.calls: list[dict] = []

    def set_stock(self, product_name: str, on_hand: int) -> None:
        self.on_hand[product_name] = on_hand

    def available(self, product_name: str) -> int:
        return self.on_hand.get(product_name, 0) - self.reserved.get(product_name, 0)

    def check_stock(self, product_name: str, quantity: int) -> bool:
        self.calls.append({"method": "check_stock", "product_name": product_name, "quantity": quantity})
        return self.available(product_name) >= quantity

    def reserve_stock(self, product_name: str, quantity: int) -> bool:
        self.calls.append({"method": "reserve_stock", "product_name": product_name, "quantity": quantity})
        if self.available(product_name) < quantity:
            return False
        self.reserved[product_name] = self.reserved.get(product_name, 0) + quantity
        return True

    def release_reserved_stock(self, product_name: str, quantity: int) -> None:
        self.calls.append(
            {"method": "release_reserved_stock", "product_name": product_name, "quantity": quantity}
        )
        remaining = self.reserved.get(product_name, 0) - quantity
        if remaining < 0:
            raise ValueError(f"Cannot release {quantity} units of {product_name}: only {remaining + quantity} reserved")
        self.reserved[product_name] = remaining

    def reset(self) -> None:
        self.on_hand.clear()
        self.reserved.clear()
        self.calls.clear()
