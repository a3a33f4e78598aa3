"""
Invoice endpoints: listings, generation, status override and reminders.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from motel.api.deps import audit_trail, get_mailer, get_sms_sender
from motel.core.dependencies import ActorContext, get_db, require
from motel.core.exceptions import BusinessRuleError
from motel.core.permissions import Operation
from motel.schemas.common.enums import InvoiceStatus, ReminderChannel
from motel.schemas.invoice import (
    GenerationResponse,
    InvoiceResponse,
    ReminderRequest,
    ReminderResponse,
)
from motel.services.billing_service import BillingService
from motel.services.invoice_service import InvoiceService
from motel.services.reminder_service import ReminderService
from motel.utils.email import SmtpMailer
from motel.utils.sms import SmsGatewaySender

router = APIRouter(prefix="/invoices", tags=["invoices"], dependencies=[Depends(audit_trail)])


@router.get("", response_model=List[InvoiceResponse])
def list_invoices(
    status: Optional[InvoiceStatus] = Query(None),
    month: Optional[int] = Query(None, ge=1, le=12),
    year: Optional[int] = Query(None),
    actor: ActorContext = Depends(require(Operation.INVOICE_LIST)),
    db: Session = Depends(get_db),
):
    return InvoiceService(db).list_invoices(status=status, month=month, year=year)


@router.get("/me", response_model=List[InvoiceResponse])
def my_invoices(
    actor: ActorContext = Depends(require(Operation.INVOICE_SELF)),
    db: Session = Depends(get_db),
):
    return InvoiceService(db).list_for_tenant(actor.tenant_id)


@router.post("/generate", response_model=GenerationResponse)
def generate_invoices(
    actor: ActorContext = Depends(require(Operation.INVOICE_GENERATE)),
    db: Session = Depends(get_db),
):
    """Generate invoices for the previous and current month; safe to repeat."""
    results = BillingService(db).generate_for_recent_months(date.today())
    return GenerationResponse(
        results=results,
        total_created=sum(r.created for r in results),
    )


@router.put("/{invoice_id}/status", response_model=InvoiceResponse)
def set_invoice_status(
    invoice_id: int,
    status: InvoiceStatus = Query(..., description="New status"),
    actor: ActorContext = Depends(require(Operation.INVOICE_SET_STATUS)),
    db: Session = Depends(get_db),
):
    return InvoiceService(db).set_status(invoice_id, status)


@router.post("/{invoice_id}/remind", response_model=ReminderResponse)
def send_invoice_reminder(
    invoice_id: int,
    payload: Optional[ReminderRequest] = None,
    actor: ActorContext = Depends(require(Operation.INVOICE_REMIND)),
    db: Session = Depends(get_db),
    mailer: SmtpMailer = Depends(get_mailer),
    sms_sender: SmsGatewaySender = Depends(get_sms_sender),
):
    channel = payload.channel if payload else None
    result = ReminderService(db, mailer=mailer, sms_sender=sms_sender).send_reminder(invoice_id, channel)
    if not result.is_success:
        raise BusinessRuleError(result.message, details=result.error.details)
    return ReminderResponse(message=result.message, channel=ReminderChannel.parse(channel).value)
