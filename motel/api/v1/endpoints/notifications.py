"""
Notification endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from motel.api.deps import audit_trail
from motel.core.dependencies import ActorContext, get_db, require
from motel.core.permissions import Operation
from motel.schemas.notification import NotificationCreate, NotificationResponse
from motel.services.notification_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"], dependencies=[Depends(audit_trail)])


@router.get("", response_model=List[NotificationResponse])
def list_my_notifications(
    unread_only: bool = Query(False),
    actor: ActorContext = Depends(require(Operation.NOTIFICATION_READ_OWN)),
    db: Session = Depends(get_db),
):
    return NotificationService(db).list_for_user(actor.user_id, unread_only=unread_only)


@router.put("/{notification_id}/read", response_model=NotificationResponse)
def mark_notification_read(
    notification_id: int,
    actor: ActorContext = Depends(require(Operation.NOTIFICATION_READ_OWN)),
    db: Session = Depends(get_db),
):
    return NotificationService(db).mark_read(notification_id, actor.user_id)


@router.post("", response_model=List[NotificationResponse], status_code=status.HTTP_201_CREATED)
def create_notification(
    payload: NotificationCreate,
    actor: ActorContext = Depends(require(Operation.NOTIFICATION_CREATE)),
    db: Session = Depends(get_db),
):
    """Notify one user, or every active user when user_id is omitted."""
    return NotificationService(db).create_and_push(payload.message, payload.user_id)
