"""
System Log Repository.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from motel.models.system_log import SystemLog
from motel.repositories.base_repository import BaseRepository


class SystemLogRepository(BaseRepository[SystemLog]):
    """Repository for the audit trail."""

    def __init__(self, db: Session):
        super().__init__(SystemLog, db)

    def list_recent(self, limit: Optional[int] = 200) -> List[SystemLog]:
        stmt = (
            select(SystemLog)
            .options(joinedload(SystemLog.actor))
            .order_by(SystemLog.created_at.desc(), SystemLog.id.desc())
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.scalars(stmt).all())
