"""
Lease contract lifecycle.

Creating a contract marks its room OCCUPIED and ending it marks the room
AVAILABLE. A room carries at most one ACTIVE contract.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from motel.core.exceptions import (
    BusinessRuleError,
    ConflictError,
    InvalidReferenceError,
    ResourceNotFoundError,
)
from motel.models.contract import Contract
from motel.repositories.contract_repository import ContractRepository
from motel.repositories.room_repository import RoomRepository
from motel.repositories.tenant_repository import TenantRepository
from motel.schemas.common.enums import ContractStatus, RoomStatus
from motel.schemas.contract import ContractCreate, ContractExtend
from motel.services.base.base_service import BaseService


class ContractService(BaseService):

    def __init__(self, db: Session):
        super().__init__(db)
        self.contracts = ContractRepository(db)
        self.rooms = RoomRepository(db)
        self.tenants = TenantRepository(db)

    def list_contracts(self) -> List[Contract]:
        return self.contracts.list_with_details()

    def list_for_tenant(self, tenant_id: Optional[int]) -> List[Contract]:
        if tenant_id is None:
            return []
        return self.contracts.list_for_tenant(tenant_id)

    def get_contract(self, contract_id: int) -> Contract:
        contract = self.contracts.find_with_details(contract_id)
        if contract is None:
            raise ResourceNotFoundError("Contract", contract_id)
        return contract

    def create_contract(self, data: ContractCreate) -> Contract:
        """
        Open an ACTIVE contract and occupy the room.

        Raises:
            InvalidReferenceError: Unknown room or tenant
            ConflictError: The room already has an ACTIVE contract
        """
        room = self.rooms.find_by_id(data.room_id)
        if room is None:
            raise InvalidReferenceError("Room", data.room_id)
        tenant = self.tenants.find_by_id(data.tenant_id)
        if tenant is None:
            raise InvalidReferenceError("Tenant", data.tenant_id)

        existing = self.contracts.active_for_room(room.id)
        if existing is not None:
            raise ConflictError(
                f"Room {room.code} already has an active contract",
                details={"room_id": room.id, "contract_id": existing.id},
            )

        contract = self.contracts.create(
            Contract(
                room_id=room.id,
                tenant_id=tenant.id,
                start_date=data.start_date,
                end_date=data.end_date,
                deposit=data.deposit,
                rent=data.rent,
                status=ContractStatus.ACTIVE,
            )
        )
        room.status = RoomStatus.OCCUPIED
        self.commit()

        self._logger.info(
            "Contract created",
            extra={"contract_id": contract.id, "room_id": room.id, "tenant_id": tenant.id},
        )
        return self.get_contract(contract.id)

    def extend_contract(self, contract_id: int, data: ContractExtend) -> Contract:
        contract = self.contracts.find_by_id(contract_id)
        if contract is None:
            raise ResourceNotFoundError("Contract", contract_id)
        if contract.start_date and data.end_date < contract.start_date:
            raise BusinessRuleError(
                "New end date is before the contract start date",
                details={"start_date": contract.start_date.isoformat(), "end_date": data.end_date.isoformat()},
            )

        contract.end_date = data.end_date
        self.commit()
        self._logger.info("Contract extended", extra={"contract_id": contract_id, "end_date": data.end_date.isoformat()})
        return self.get_contract(contract_id)

    def end_contract(self, contract_id: int) -> Contract:
        """
        End a contract and free its room.

        Ending an already ENDED contract changes nothing.
        """
        contract = self.contracts.find_by_id(contract_id)
        if contract is None:
            raise ResourceNotFoundError("Contract", contract_id)

        if contract.status == ContractStatus.ENDED:
            return self.get_contract(contract_id)

        contract.status = ContractStatus.ENDED
        room = self.rooms.find_by_id(contract.room_id)
        if room is not None:
            room.status = RoomStatus.AVAILABLE
        self.commit()

        self._logger.info("Contract ended", extra={"contract_id": contract_id, "room_id": contract.room_id})
        return self.get_contract(contract_id)
