from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from motel.core.exceptions import InvalidReferenceError, ValidationError
from motel.schemas.common.enums import InvoiceStatus
from motel.schemas.payment import PaymentCreate
from motel.services.invoice_service import InvoiceService
from motel.services.payment_service import PaymentService, derive_status


def test_derive_status():
    assert derive_status(Decimal("0"), Decimal("100")) is None
    assert derive_status(Decimal("40"), Decimal("100")) == InvoiceStatus.PARTIAL
    assert derive_status(Decimal("100"), Decimal("100")) == InvoiceStatus.PAID
    assert derive_status(Decimal("120"), Decimal("100")) == InvoiceStatus.PAID


def test_payments_move_invoice_to_partial_then_paid(db, factory):
    invoice = factory.invoice(factory.room("P1"), factory.tenant(), total="1500000")
    service = PaymentService(db)

    service.record_payment(PaymentCreate(invoice_id=invoice.id, amount=Decimal("500000")))
    db.refresh(invoice)
    assert invoice.status == InvoiceStatus.PARTIAL

    service.record_payment(PaymentCreate(invoice_id=invoice.id, amount=Decimal("1000000")))
    db.refresh(invoice)
    assert invoice.status == InvoiceStatus.PAID
    assert service.total_paid(invoice.id) == Decimal("1500000")
    assert len(service.list_for_invoice(invoice.id)) == 2


def test_status_never_moves_backwards(db, factory):
    invoice = factory.invoice(factory.room("P2"), None, total="1000", status=InvoiceStatus.PAID)

    PaymentService(db).record_payment(PaymentCreate(invoice_id=invoice.id, amount=Decimal("10")))

    db.refresh(invoice)
    assert invoice.status == InvoiceStatus.PAID


def test_payment_for_unknown_invoice(db):
    with pytest.raises(InvalidReferenceError):
        PaymentService(db).record_payment(PaymentCreate(invoice_id=42, amount=Decimal("10")))


def test_non_positive_amount_rejected(db, factory):
    invoice = factory.invoice(factory.room("P3"), None)
    data = PaymentCreate.model_construct(invoice_id=invoice.id, amount=Decimal("0"), method=None, paid_at=None)

    with pytest.raises(ValidationError):
        PaymentService(db).record_payment(data)


def test_manual_status_override_can_go_backwards(db, factory):
    invoice = factory.invoice(factory.room("P4"), None, status=InvoiceStatus.PAID)

    updated = InvoiceService(db).set_status(invoice.id, InvoiceStatus.UNPAID)

    assert updated.status == InvoiceStatus.UNPAID


def test_payment_defaults_to_current_utc_time(db, factory):
    invoice = factory.invoice(factory.room("P9"), None, total="1000")
    before = datetime.now(timezone.utc).replace(tzinfo=None)

    payment = PaymentService(db).record_payment(PaymentCreate(invoice_id=invoice.id, amount=Decimal("10")))

    assert payment.paid_at.tzinfo is None
    assert before - timedelta(seconds=1) <= payment.paid_at <= before + timedelta(minutes=1)
