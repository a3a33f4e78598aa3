"""
Contract Repository.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from motel.models.contract import Contract
from motel.repositories.base_repository import BaseRepository
from motel.schemas.common.enums import ContractStatus


class ContractRepository(BaseRepository[Contract]):
    """Repository for lease contracts."""

    def __init__(self, db: Session):
        super().__init__(Contract, db)

    def _with_details(self):
        return select(Contract).options(
            joinedload(Contract.room),
            joinedload(Contract.tenant),
        )

    def list_with_details(self) -> List[Contract]:
        stmt = self._with_details().order_by(Contract.id)
        return list(self.db.scalars(stmt).unique().all())

    def find_with_details(self, contract_id: int) -> Optional[Contract]:
        stmt = self._with_details().where(Contract.id == contract_id)
        return self.db.scalars(stmt).first()

    def find_active(self) -> List[Contract]:
        """ACTIVE contracts with room and tenant loaded, oldest first."""
        stmt = (
            self._with_details()
            .where(Contract.status == ContractStatus.ACTIVE)
            .order_by(Contract.id)
        )
        return list(self.db.scalars(stmt).unique().all())

    def active_for_room(self, room_id: int) -> Optional[Contract]:
        """First ACTIVE contract referencing the room, if any."""
        stmt = (
            select(Contract)
            .where(Contract.room_id == room_id, Contract.status == ContractStatus.ACTIVE)
            .order_by(Contract.id)
        )
        return self.db.scalars(stmt).first()

    def list_for_tenant(self, tenant_id: int) -> List[Contract]:
        stmt = (
            self._with_details()
            .where(Contract.tenant_id == tenant_id)
            .order_by(Contract.id)
        )
        return list(self.db.scalars(stmt).unique().all())
