"""
Payment reconciliation.

Records a payment and moves the invoice status forward from the sum of
all stored payments. Status only ever advances UNPAID -> PARTIAL -> PAID.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from motel.core.exceptions import InvalidReferenceError, ValidationError
from motel.models.base import utc_now
from motel.models.payment import Payment
from motel.repositories.invoice_repository import InvoiceRepository
from motel.repositories.payment_repository import PaymentRepository
from motel.schemas.common.enums import InvoiceStatus
from motel.schemas.payment import PaymentCreate
from motel.services.base.base_service import BaseService


def derive_status(total_paid: Decimal, invoice_total: Decimal) -> Optional[InvoiceStatus]:
    """
    Status implied by the amount received, or None when nothing was received.
    """
    if total_paid <= 0:
        return None
    if total_paid >= invoice_total:
        return InvoiceStatus.PAID
    return InvoiceStatus.PARTIAL


class PaymentService(BaseService):
    """Payment recording and invoice settlement."""

    def __init__(self, db: Session):
        super().__init__(db)
        self.invoices = InvoiceRepository(db)
        self.payments = PaymentRepository(db)

    def record_payment(self, data: PaymentCreate) -> Payment:
        """
        Store a payment and reconcile the invoice status.

        The invoice row is locked for the rest of the transaction and the
        paid total is summed from the payments table after the insert.

        Raises:
            ValidationError: If the amount is not positive
            InvalidReferenceError: If the invoice does not exist
        """
        if data.amount is None or data.amount <= 0:
            raise ValidationError(
                "Payment amount must be greater than zero",
                field_errors={"amount": ["must be greater than zero"]},
            )

        invoice = self.invoices.get_for_update(data.invoice_id)
        if invoice is None:
            raise InvalidReferenceError("Invoice", data.invoice_id)

        payment = self.payments.create(
            Payment(
                invoice_id=invoice.id,
                amount=data.amount,
                method=data.method,
                paid_at=data.paid_at or utc_now(),
            )
        )

        total_paid = self.payments.sum_for_invoice(invoice.id)
        candidate = derive_status(total_paid, invoice.total)
        previous = invoice.status
        if candidate is not None and candidate.rank > invoice.status.rank:
            invoice.status = candidate

        self.commit()
        self.db.refresh(payment)

        self._logger.info(
            "Payment recorded",
            extra={
                "payment_id": payment.id,
                "invoice_id": invoice.id,
                "amount": str(payment.amount),
                "total_paid": str(total_paid),
                "status_before": previous.value,
                "status_after": invoice.status.value,
            },
        )
        return payment

    def list_for_invoice(self, invoice_id: int) -> List[Payment]:
        return self.payments.list_for_invoice(invoice_id)

    def total_paid(self, invoice_id: int) -> Decimal:
        return self.payments.sum_for_invoice(invoice_id)
