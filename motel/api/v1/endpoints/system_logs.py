"""
Audit trail endpoint.
"""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from motel.core.dependencies import ActorContext, get_db, require
from motel.core.permissions import Operation
from motel.schemas.system_log import SystemLogResponse
from motel.services.audit_service import AuditService

router = APIRouter(prefix="/system-logs", tags=["system-logs"])


@router.get("", response_model=List[SystemLogResponse])
def list_system_logs(
    limit: int = Query(200, ge=1, le=1000),
    actor: ActorContext = Depends(require(Operation.SYSTEM_LOG_READ)),
    db: Session = Depends(get_db),
):
    return AuditService(db).list_recent(limit=limit)
