"""
Room management.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from motel.core.exceptions import ConflictError, InvalidReferenceError, ResourceNotFoundError
from motel.models.room import Room
from motel.repositories.area_repository import AreaRepository
from motel.repositories.contract_repository import ContractRepository
from motel.repositories.invoice_repository import InvoiceRepository
from motel.repositories.room_repository import RoomRepository
from motel.schemas.common.enums import RoomStatus
from motel.schemas.room import RoomCreate, RoomUpdate
from motel.services.base.base_service import BaseService


class RoomService(BaseService):

    def __init__(self, db: Session):
        super().__init__(db)
        self.rooms = RoomRepository(db)
        self.areas = AreaRepository(db)
        self.contracts = ContractRepository(db)
        self.invoices = InvoiceRepository(db)

    def list_rooms(self) -> List[Room]:
        return self.rooms.find_all(order_by=Room.code)

    def list_available(self) -> List[Room]:
        return self.rooms.find_by_status(RoomStatus.AVAILABLE)

    def get_room(self, room_id: int) -> Room:
        return self.rooms.get_by_id(room_id)

    def _check_area(self, area_id: Optional[int]) -> None:
        if area_id is not None and self.areas.find_by_id(area_id) is None:
            raise InvalidReferenceError("Area", area_id)

    def create_room(self, data: RoomCreate) -> Room:
        if self.rooms.find_by_code(data.code) is not None:
            raise ConflictError(f"Room code {data.code} is already in use", details={"code": data.code})
        self._check_area(data.area_id)

        room = self.rooms.create(Room(**data.model_dump()))
        self.commit()
        self._logger.info("Room created", extra={"room_id": room.id, "code": room.code})
        return room

    def update_room(self, room_id: int, data: RoomUpdate) -> Room:
        room = self.rooms.get_by_id(room_id)
        changes = data.model_dump(exclude_unset=True)

        new_code = changes.get("code")
        if new_code and new_code != room.code and self.rooms.find_by_code(new_code) is not None:
            raise ConflictError(f"Room code {new_code} is already in use", details={"code": new_code})
        self._check_area(changes.get("area_id"))

        self.rooms.update(room, changes)
        self.commit()
        return room

    def delete_room(self, room_id: int) -> None:
        """
        Raises:
            ResourceNotFoundError: Unknown room
            ConflictError: The room is referenced by contracts or invoices
        """
        room = self.rooms.find_by_id(room_id)
        if room is None:
            raise ResourceNotFoundError("Room", room_id)
        if self.contracts.count({"room_id": room_id}) or self.invoices.count({"room_id": room_id}):
            raise ConflictError(
                f"Room {room.code} has contracts or invoices and cannot be deleted",
                details={"room_id": room_id},
            )

        self.rooms.delete(room)
        self.commit()
