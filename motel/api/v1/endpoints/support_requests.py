"""
Support request endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from motel.api.deps import audit_trail
from motel.core.dependencies import ActorContext, get_db, require
from motel.core.permissions import Operation
from motel.schemas.common.enums import SupportRequestStatus
from motel.schemas.support_request import (
    SupportRequestCreate,
    SupportRequestResponse,
    SupportRequestUpdate,
)
from motel.services.support_request_service import SupportRequestService

router = APIRouter(prefix="/support-requests", tags=["support-requests"], dependencies=[Depends(audit_trail)])


@router.get("", response_model=List[SupportRequestResponse])
def list_support_requests(
    status_filter: Optional[SupportRequestStatus] = Query(None, alias="status"),
    actor: ActorContext = Depends(require(Operation.SUPPORT_REQUEST_LIST)),
    db: Session = Depends(get_db),
):
    service = SupportRequestService(db)
    if actor.is_tenant:
        if actor.tenant_id is None:
            return []
        return service.list_requests(status=status_filter, tenant_id=actor.tenant_id)
    return service.list_requests(status=status_filter)


@router.post("", response_model=SupportRequestResponse, status_code=status.HTTP_201_CREATED)
def create_support_request(
    payload: SupportRequestCreate,
    actor: ActorContext = Depends(require(Operation.SUPPORT_REQUEST_CREATE)),
    db: Session = Depends(get_db),
):
    return SupportRequestService(db).create_request(actor.user_id, payload)


@router.put("/{request_id}", response_model=SupportRequestResponse)
def update_support_request(
    request_id: int,
    payload: SupportRequestUpdate,
    actor: ActorContext = Depends(require(Operation.SUPPORT_REQUEST_MANAGE)),
    db: Session = Depends(get_db),
):
    return SupportRequestService(db).update_request(request_id, payload)
