"""
Meter reading model.

Raw electric/water counters for a room and period, with the costs
computed when the reading is recorded.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from motel.models.base import BaseModel, utc_now
from motel.models.room import Room


class MeterReading(BaseModel):
    __tablename__ = "meter_readings"
    __table_args__ = (
        Index("ix_meter_readings_room_period", "room_id", "year", "month"),
    )

    room_id: Mapped[int] = mapped_column(ForeignKey("rooms.id"), nullable=False)
    month: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    old_electric: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    new_electric: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    old_water: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    new_water: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    electricity_cost: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False, default=Decimal("0"))
    water_cost: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False, default=Decimal("0"))
    total_cost: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False, default=Decimal("0"))

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utc_now)

    room: Mapped[Room] = relationship()
