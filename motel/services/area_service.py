"""
Area management.
"""

from typing import List

from sqlalchemy.orm import Session

from motel.core.exceptions import ConflictError
from motel.models.area import Area
from motel.repositories.area_repository import AreaRepository
from motel.repositories.room_repository import RoomRepository
from motel.schemas.area import AreaCreate, AreaUpdate
from motel.services.base.base_service import BaseService


class AreaService(BaseService):

    def __init__(self, db: Session):
        super().__init__(db)
        self.areas = AreaRepository(db)
        self.rooms = RoomRepository(db)

    def list_areas(self) -> List[Area]:
        return self.areas.list_by_name()

    def create_area(self, data: AreaCreate) -> Area:
        area = self.areas.create(Area(**data.model_dump()))
        self.commit()
        self._logger.info("Area created", extra={"area_id": area.id})
        return area

    def update_area(self, area_id: int, data: AreaUpdate) -> Area:
        area = self.areas.get_by_id(area_id)
        self.areas.update(area, data.model_dump(exclude_unset=True))
        self.commit()
        return area

    def delete_area(self, area_id: int) -> None:
        """
        Raises:
            ResourceNotFoundError: Unknown area
            ConflictError: Rooms still belong to the area
        """
        area = self.areas.get_by_id(area_id)
        if self.rooms.count({"area_id": area_id}):
            raise ConflictError(
                f"Area {area.name} still has rooms and cannot be deleted",
                details={"area_id": area_id},
            )
        self.areas.delete(area)
        self.commit()
