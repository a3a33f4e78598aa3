"""
Tenant management.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from motel.core.exceptions import ConflictError, InvalidReferenceError, ResourceNotFoundError
from motel.models.tenant import Tenant
from motel.models.user import User
from motel.repositories.contract_repository import ContractRepository
from motel.repositories.tenant_repository import TenantRepository
from motel.repositories.user_repository import UserRepository
from motel.schemas.tenant import TenantCreate, TenantUpdate
from motel.services.base.base_service import BaseService


class TenantService(BaseService):

    def __init__(self, db: Session):
        super().__init__(db)
        self.tenants = TenantRepository(db)
        self.users = UserRepository(db)
        self.contracts = ContractRepository(db)

    def list_tenants(self, query: Optional[str] = None) -> List[Tenant]:
        """All tenants, or those whose name contains ``query`` (case-insensitive)."""
        if query and query.strip():
            return self.tenants.search_by_name(query)
        return self.tenants.find_all(order_by=Tenant.full_name)

    def get_tenant(self, tenant_id: int) -> Tenant:
        return self.tenants.get_by_id(tenant_id)

    def find_for_user(self, user_id: int) -> Optional[Tenant]:
        return self.tenants.find_by_user_id(user_id)

    def _check_user_link(self, user_id: Optional[int], tenant_id: Optional[int] = None) -> None:
        if user_id is None:
            return
        if self.users.find_by_id(user_id) is None:
            raise InvalidReferenceError("User", user_id)
        linked = self.tenants.find_by_user_id(user_id)
        if linked is not None and linked.id != tenant_id:
            raise ConflictError(
                "User is already linked to another tenant",
                details={"user_id": user_id, "tenant_id": linked.id},
            )

    def create_tenant(self, data: TenantCreate) -> Tenant:
        self._check_user_link(data.user_id)
        tenant = self.tenants.create(Tenant(**data.model_dump()))
        self.commit()
        self._logger.info("Tenant created", extra={"tenant_id": tenant.id})
        return tenant

    def ensure_for_user(self, user: User) -> Tenant:
        """Tenant record linked to the user, created from the account details when missing."""
        tenant = self.tenants.find_by_user_id(user.id)
        if tenant is not None:
            return tenant

        tenant = self.tenants.create(
            Tenant(
                full_name=user.full_name or user.username,
                phone=user.phone,
                user_id=user.id,
            )
        )
        self._logger.info("Tenant record created for user", extra={"tenant_id": tenant.id, "user_id": user.id})
        return tenant

    def update_tenant(self, tenant_id: int, data: TenantUpdate) -> Tenant:
        tenant = self.tenants.get_by_id(tenant_id)
        changes = data.model_dump(exclude_unset=True)
        if "user_id" in changes:
            self._check_user_link(changes["user_id"], tenant_id=tenant.id)

        self.tenants.update(tenant, changes)
        self.commit()
        return tenant

    def delete_tenant(self, tenant_id: int) -> None:
        tenant = self.tenants.find_by_id(tenant_id)
        if tenant is None:
            raise ResourceNotFoundError("Tenant", tenant_id)
        if self.contracts.count({"tenant_id": tenant_id}):
            raise ConflictError(
                "Tenant has contracts and cannot be deleted",
                details={"tenant_id": tenant_id},
            )

        self.tenants.delete(tenant)
        self.commit()
