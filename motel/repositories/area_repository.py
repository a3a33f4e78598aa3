"""
Area Repository.
"""

from typing import List

from sqlalchemy.orm import Session

from motel.models.area import Area
from motel.repositories.base_repository import BaseRepository


class AreaRepository(BaseRepository[Area]):
    """Repository for areas."""

    def __init__(self, db: Session):
        super().__init__(Area, db)

    def list_by_name(self) -> List[Area]:
        return self.find_all(order_by=Area.name)
