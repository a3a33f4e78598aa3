from motel.schemas.common.enums import InvoiceStatus
from motel.services.reminder_service import (
    ALREADY_PAID,
    INVALID_CHANNEL,
    INVOICE_NOT_FOUND,
    NO_EMAIL,
    NO_PHONE,
    NO_TENANT,
    ReminderService,
)
from motel.utils.email import EmailConfig, SmtpMailer
from motel.utils.sms import SMSConfig, SmsGatewaySender

from tests.conftest import FakeMailer, FakeSmsSender


def _service(db, mailer=None, sms_sender=None):
    return ReminderService(db, mailer=mailer or FakeMailer(), sms_sender=sms_sender or FakeSmsSender())


def test_invalid_channel_checked_before_invoice(db):
    result = _service(db).send_reminder(12345, "fax")

    assert not result.is_success
    assert result.message == INVALID_CHANNEL


def test_blank_channel_is_invalid(db):
    assert _service(db).send_reminder(1, "  ").message == INVALID_CHANNEL


def test_unknown_invoice(db):
    assert _service(db).send_reminder(12345, "email").message == INVOICE_NOT_FOUND


def test_invoice_without_tenant(db, factory):
    invoice = factory.invoice(factory.room("R1"), None)
    assert _service(db).send_reminder(invoice.id, "sms").message == NO_TENANT


def test_paid_invoice_checked_before_contact_details(db, factory):
    tenant = factory.tenant(email=None, phone=None)
    invoice = factory.invoice(factory.room("R2"), tenant, status=InvoiceStatus.PAID)

    assert _service(db).send_reminder(invoice.id, "email").message == ALREADY_PAID


def test_missing_contact_details(db, factory):
    tenant = factory.tenant(email="  ", phone=None)
    invoice = factory.invoice(factory.room("R3"), tenant)
    service = _service(db)

    assert service.send_reminder(invoice.id, "email").message == NO_EMAIL
    assert service.send_reminder(invoice.id, "sms").message == NO_PHONE


def test_email_reminder_records_bookkeeping(db, factory):
    mailer = FakeMailer()
    tenant = factory.tenant(full_name="Tran Thi B", email="b@example.com")
    invoice = factory.invoice(factory.room("R4"), tenant, month=5, year=2024, total="1500000")

    result = _service(db, mailer=mailer).send_reminder(invoice.id, "EMAIL")

    assert result.is_success
    assert result.message == "Email reminder sent."
    to, subject, body = mailer.sent[0]
    assert to == "b@example.com"
    assert "R4" in subject
    assert "1,500,000 VND" in body
    assert "5/2024" in body

    db.refresh(invoice)
    assert invoice.reminder_email_count == 1
    assert invoice.last_reminder_email_at is not None
    assert invoice.last_reminder_email_message == body
    assert invoice.reminder_sms_count == 0


def test_sms_reminder_counts_each_send(db, factory):
    sender = FakeSmsSender()
    invoice = factory.invoice(factory.room("R5"), factory.tenant(phone="0911222333"))
    service = _service(db, sms_sender=sender)

    service.send_reminder(invoice.id, "sms")
    service.send_reminder(invoice.id, "sms")

    db.refresh(invoice)
    assert invoice.reminder_sms_count == 2
    assert sender.sent[0][0] == "0911222333"
    assert invoice.last_reminder_sms_message == sender.sent[-1][1]


def test_transport_failure_leaves_invoice_untouched(db, factory):
    invoice = factory.invoice(factory.room("R6"), factory.tenant())

    result = _service(db, mailer=FakeMailer(fail=True)).send_reminder(invoice.id, "email")

    assert not result.is_success
    assert "connection refused" in result.message
    db.refresh(invoice)
    assert invoice.reminder_email_count == 0
    assert invoice.last_reminder_email_at is None


def test_email_subject_names_room_and_period(db, factory):
    mailer = FakeMailer()
    invoice = factory.invoice(factory.room("R7"), factory.tenant(), month=5, year=2024)

    _service(db, mailer=mailer).send_reminder(invoice.id, "email")

    assert mailer.sent[0][1] == "Reminder — invoice for room R7, period 5/2024"


def test_unconfigured_transports_still_record_reminders(db, factory):
    mailer = SmtpMailer(EmailConfig(smtp_host=None, smtp_port=25, username=None, password=None))
    sender = SmsGatewaySender(SMSConfig(enabled=False, api_url=None))
    invoice = factory.invoice(factory.room("R8"), factory.tenant(phone="0911222333"))
    service = ReminderService(db, mailer=mailer, sms_sender=sender)

    assert service.send_reminder(invoice.id, "email").is_success
    assert service.send_reminder(invoice.id, "sms").is_success

    db.refresh(invoice)
    assert invoice.reminder_email_count == 1
    assert invoice.last_reminder_email_at is not None
    assert invoice.reminder_sms_count == 1
    assert invoice.last_reminder_sms_at is not None
