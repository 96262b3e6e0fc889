"""Inventory port — abstract interface for stock checks and reservations."""

from abc import ABC, abstractmethod


class InventoryPort(ABC):
    """Abstract interface for inventory adapters."""

    @abstractmethod
    def check_stock(self, product_name: str, quantity: int) -> bool:
        """Whether ``quantity`` units are currently available. Does not hold them."""
        ...

    @abstractmethod
    def reserve_stock(self, product_name: str, quantity: int) -> bool:
        """Hold ``quantity`` units. Returns False when not enough are available."""
        ...

    @abstractmethod
    def release_reserved_stock(self, product_name: str, quantity: int) -> None:
        """Return previously reserved units to the available pool."""
        ...
