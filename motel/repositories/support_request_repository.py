"""
Support Request Repository.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from motel.models.support_request import SupportRequest
from motel.repositories.base_repository import BaseRepository
from motel.schemas.common.enums import SupportRequestStatus


class SupportRequestRepository(BaseRepository[SupportRequest]):
    """Repository for tenant support tickets."""

    def __init__(self, db: Session):
        super().__init__(SupportRequest, db)

    def list_with_tenant(
        self,
        status: Optional[SupportRequestStatus] = None,
        tenant_id: Optional[int] = None,
    ) -> List[SupportRequest]:
        stmt = select(SupportRequest).options(joinedload(SupportRequest.tenant))
        if status is not None:
            stmt = stmt.where(SupportRequest.status == status)
        if tenant_id is not None:
            stmt = stmt.where(SupportRequest.tenant_id == tenant_id)
        stmt = stmt.order_by(SupportRequest.created_at.desc(), SupportRequest.id.desc())
        return list(self.db.scalars(stmt).all())
