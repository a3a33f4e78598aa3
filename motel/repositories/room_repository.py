"""
Room Repository.
"""

from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from motel.models.room import Room
from motel.repositories.base_repository import BaseRepository
from motel.schemas.common.enums import RoomStatus


class RoomRepository(BaseRepository[Room]):
    """Repository for rooms."""

    def __init__(self, db: Session):
        super().__init__(Room, db)

    def find_by_code(self, code: str) -> Optional[Room]:
        return self.db.scalars(select(Room).where(Room.code == code)).first()

    def find_by_status(self, status: RoomStatus) -> List[Room]:
        stmt = select(Room).where(Room.status == status).order_by(Room.code)
        return list(self.db.scalars(stmt).all())

    def count_by_status(self) -> Dict[RoomStatus, int]:
        stmt = select(Room.status, func.count(Room.id)).group_by(Room.status)
        counts = {status: 0 for status in RoomStatus}
        for status, count in self.db.execute(stmt).all():
            counts[status] = count
        return counts
