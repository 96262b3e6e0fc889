"""Payments bounded context — settlement of order totals."""
