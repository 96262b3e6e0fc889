"""Contracts shared across the ordering, inventory, payments and notifications contexts."""
