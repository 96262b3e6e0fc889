"""Inventory bounded context — stock availability and reservations."""
