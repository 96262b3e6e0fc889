"""Ordering bounded context — order creation, pricing and lifecycle rules."""
