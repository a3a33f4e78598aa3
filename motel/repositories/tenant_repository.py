"""
Tenant Repository.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from motel.models.tenant import Tenant
from motel.repositories.base_repository import BaseRepository


class TenantRepository(BaseRepository[Tenant]):
    """Repository for tenants."""

    def __init__(self, db: Session):
        super().__init__(Tenant, db)

    def find_by_user_id(self, user_id: int) -> Optional[Tenant]:
        return self.db.scalars(select(Tenant).where(Tenant.user_id == user_id)).first()

    def search_by_name(self, query: str) -> List[Tenant]:
        """Case-insensitive substring match on full name."""
        pattern = f"%{query.strip().lower()}%"
        stmt = (
            select(Tenant)
            .where(Tenant.full_name.ilike(pattern))
            .order_by(Tenant.full_name)
        )
        return list(self.db.scalars(stmt).all())
