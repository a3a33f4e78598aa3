"""Motel management backend: rooms, tenants, contracts, billing and reminders."""

__version__ = "1.0.0"
