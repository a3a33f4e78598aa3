"""
Endpoint-level dependencies: outbound transports and the audit trail.
"""

from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from motel.core.dependencies import ActorContext, get_actor, get_db
from motel.core.exceptions import RepositoryError
from motel.core.logging import get_logger
from motel.services.audit_service import AuditService
from motel.utils.email import SmtpMailer
from motel.utils.sms import SmsGatewaySender

logger = get_logger(__name__)

AUDITED_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def get_mailer() -> SmtpMailer:
    return SmtpMailer()


def get_sms_sender() -> SmsGatewaySender:
    return SmsGatewaySender()


def audit_trail(
    request: Request,
    actor: ActorContext = Depends(get_actor),
    db: Session = Depends(get_db),
) -> Generator[None, None, None]:
    """
    Record a SystemLog row after a mutating request handled without error.

    Requests whose handler raised never reach the code after ``yield``.
    """
    yield

    if request.method not in AUDITED_METHODS:
        return
    try:
        AuditService(db).record(
            actor_id=actor.user_id,
            action=request.method,
            entity_type="API",
            entity_id=None,
            detail=f"Request to {request.url.path}",
        )
    except (SQLAlchemyError, RepositoryError) as e:
        db.rollback()
        logger.error(
            f"Failed to write audit entry: {e}",
            extra={"method": request.method, "url": request.url.path, "actor_id": actor.user_id},
        )
