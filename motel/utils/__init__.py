"""Outbound transports and formatting helpers."""
