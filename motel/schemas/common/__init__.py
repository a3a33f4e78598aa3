"""Shared schema building blocks and enumerations."""
