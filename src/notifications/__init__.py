"""Notifications bounded context — order state-change messages."""
