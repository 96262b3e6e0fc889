"""Inventory adapter registry — pluggable stock backend.

Uses FakeInventory by default. In production, configure via the
INVENTORY_ADAPTER environment variable.
"""

import os

from inventory.stock.port import InventoryPort

_inventory_instance: InventoryPort | None = None


def get_inventory() -> InventoryPort:
    """Return the configured inventory adapter (singleton)."""
    global _inventory_instance
    if _inventory_instance is None:
        adapter = os.environ.get("INVENTORY_ADAPTER", "fake")
        if adapter == "fake":
            from inventory.stock.fake_adapter import FakeInventory

            _inventory_instance = FakeInventory()
        else:
            raise ValueError(f"Unknown inventory adapter: {adapter}")
    return _inventory_instance


def set_inventory(inventory: InventoryPort) -> None:
    """Override the active inventory adapter (useful for tests)."""
    global _inventory_instance
    _inventory_instance = inventory


def reset_inventory() -> None:
    """Reset the inventory singleton (useful for testing)."""
    global _inventory_instance
    _inventory_instance = None
