"""
Payment endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from motel.api.deps import audit_trail
from motel.core.dependencies import ActorContext, get_db, require
from motel.core.exceptions import AuthorizationError
from motel.core.permissions import Operation
from motel.schemas.payment import PaymentCreate, PaymentResponse
from motel.services.invoice_service import InvoiceService
from motel.services.payment_service import PaymentService

router = APIRouter(prefix="/payments", tags=["payments"], dependencies=[Depends(audit_trail)])


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
def record_payment(
    payload: PaymentCreate,
    actor: ActorContext = Depends(require(Operation.PAYMENT_RECORD)),
    db: Session = Depends(get_db),
):
    return PaymentService(db).record_payment(payload)


@router.get("/invoice/{invoice_id}", response_model=List[PaymentResponse])
def list_invoice_payments(
    invoice_id: int,
    actor: ActorContext = Depends(require(Operation.PAYMENT_LIST_FOR_INVOICE)),
    db: Session = Depends(get_db),
):
    invoice = InvoiceService(db).get_invoice(invoice_id)
    if actor.is_tenant and (actor.tenant_id is None or invoice.tenant_id != actor.tenant_id):
        raise AuthorizationError("You can only view payments of your own invoices")
    return PaymentService(db).list_for_invoice(invoice_id)
