"""
Tenant support tickets.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from motel.models.support_request import SupportRequest
from motel.repositories.support_request_repository import SupportRequestRepository
from motel.repositories.user_repository import UserRepository
from motel.schemas.common.enums import SupportRequestStatus
from motel.schemas.support_request import SupportRequestCreate, SupportRequestUpdate
from motel.services.base.base_service import BaseService
from motel.services.tenant_service import TenantService


class SupportRequestService(BaseService):

    def __init__(self, db: Session):
        super().__init__(db)
        self.requests = SupportRequestRepository(db)
        self.users = UserRepository(db)
        self.tenant_service = TenantService(db)

    def list_requests(
        self,
        status: Optional[SupportRequestStatus] = None,
        tenant_id: Optional[int] = None,
    ) -> List[SupportRequest]:
        return self.requests.list_with_tenant(status=status, tenant_id=tenant_id)

    def create_request(self, user_id: int, data: SupportRequestCreate) -> SupportRequest:
        """Open a ticket for the user's tenant record, creating the record when missing."""
        user = self.users.get_by_id(user_id)
        tenant = self.tenant_service.ensure_for_user(user)

        request = self.requests.create(
            SupportRequest(
                tenant_id=tenant.id,
                title=data.title,
                description=data.description,
                status=SupportRequestStatus.OPEN,
            )
        )
        self.commit()
        self._logger.info("Support request opened", extra={"support_request_id": request.id, "tenant_id": tenant.id})
        return request

    def update_request(self, request_id: int, data: SupportRequestUpdate) -> SupportRequest:
        request = self.requests.get_by_id(request_id)
        self.requests.update(request, data.model_dump(exclude_unset=True, exclude_none=True))
        self.commit()
        return request
