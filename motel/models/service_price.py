"""
Service price model.

Time-versioned unit prices. The row applying to a billing period is the
one with the latest effective_from on or before the first day of that month.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from motel.models.base import BaseModel


class ServicePrice(BaseModel):
    __tablename__ = "service_prices"

    room_price: Mapped[Optional[Decimal]] = mapped_column(Numeric(precision=12, scale=2), nullable=True)
    electricity_price: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=True,
        comment="Price per kWh",
    )
    water_price: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=True,
        comment="Price per cubic metre",
    )
    effective_from: Mapped[date] = mapped_column(Date, nullable=False, index=True)
