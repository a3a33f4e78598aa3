"""
Audit trail of mutating API calls.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from motel.models.system_log import SystemLog
from motel.repositories.system_log_repository import SystemLogRepository
from motel.services.base.base_service import BaseService


class AuditService(BaseService):

    def __init__(self, db: Session):
        super().__init__(db)
        self.logs = SystemLogRepository(db)

    def record(
        self,
        actor_id: Optional[int],
        action: str,
        entity_type: Optional[str] = None,
        entity_id: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> SystemLog:
        entry = self.logs.create(
            SystemLog(
                actor_id=actor_id,
                action=action,
                entity_type=entity_type,
                entity_id=entity_id,
                detail=detail,
            )
        )
        self.commit()
        return entry

    def list_recent(self, limit: Optional[int] = 200) -> List[SystemLog]:
        return self.logs.list_recent(limit=limit)
