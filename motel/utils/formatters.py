"""
Formatting helpers for user-facing text.
"""

from decimal import Decimal
from typing import Optional

from motel.config.settings import settings


def format_money(amount: Optional[Decimal], currency: Optional[str] = None) -> str:
    """
    Render an amount as whole units with thousands separators.

    >>> format_money(Decimal("1500000"), "VND")
    '1,500,000 VND'
    """
    label = currency or settings.CURRENCY
    if amount is None:
        return f"0 {label}"
    return f"{int(amount):,} {label}"


def format_period(month: int, year: int) -> str:
    return f"{month}/{year}"
