"""
Meter Reading Repository.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from motel.models.meter_reading import MeterReading
from motel.repositories.base_repository import BaseRepository


class MeterReadingRepository(BaseRepository[MeterReading]):
    """Repository for meter readings."""

    def __init__(self, db: Session):
        super().__init__(MeterReading, db)

    def latest_for_room_period(self, room_id: int, month: int, year: int) -> Optional[MeterReading]:
        """Most recently recorded reading for a room and period."""
        stmt = (
            select(MeterReading)
            .where(
                MeterReading.room_id == room_id,
                MeterReading.month == month,
                MeterReading.year == year,
            )
            .order_by(MeterReading.id.desc())
        )
        return self.db.scalars(stmt).first()

    def list_with_room(self, room_id: Optional[int] = None) -> List[MeterReading]:
        stmt = select(MeterReading).options(joinedload(MeterReading.room))
        if room_id is not None:
            stmt = stmt.where(MeterReading.room_id == room_id)
        stmt = stmt.order_by(MeterReading.year.desc(), MeterReading.month.desc(), MeterReading.id.desc())
        return list(self.db.scalars(stmt).all())
