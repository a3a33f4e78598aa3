"""
Debt reminder dispatch over email or SMS.

Rejections are returned as failed ServiceResults rather than raised, in a
fixed order: channel, invoice, tenant, paid status, contact details.
"""

from typing import Any, Optional

from sqlalchemy.orm import Session

from motel.models.base import utc_now
from motel.models.invoice import Invoice
from motel.repositories.invoice_repository import InvoiceRepository
from motel.schemas.common.enums import InvoiceStatus, ReminderChannel
from motel.services.base.base_service import BaseService
from motel.services.base.service_result import ErrorCode, ServiceResult
from motel.utils.email import EmailError, SmtpMailer
from motel.utils.formatters import format_money, format_period
from motel.utils.sms import SMSError, SmsGatewaySender

INVALID_CHANNEL = "Invalid channel. Choose email or sms."
INVOICE_NOT_FOUND = "Invoice not found."
NO_TENANT = "Invoice has no tenant attached."
ALREADY_PAID = "Invoice is already paid; no reminder needed."
NO_EMAIL = "Tenant has no email address."
NO_PHONE = "Tenant has no phone number."


def build_email_subject(invoice: Invoice) -> str:
    room_code = invoice.room.code if invoice.room else ""
    return f"Reminder — invoice for room {room_code}, period {format_period(invoice.month, invoice.year)}"


def build_email_body(invoice: Invoice) -> str:
    name = invoice.tenant.full_name if invoice.tenant else "Guest"
    room_code = invoice.room.code if invoice.room else "-"
    return (
        f"Dear {name},\n\n"
        f"This is a reminder about your room invoice:\n"
        f"- Room: {room_code}\n"
        f"- Period: {format_period(invoice.month, invoice.year)}\n"
        f"- Total: {format_money(invoice.total)}\n\n"
        f"Please pay at your earliest convenience.\n"
        f"Kind regards."
    )


def build_sms_text(invoice: Invoice) -> str:
    room_code = invoice.room.code if invoice.room else "-"
    return (
        f"Reminder: room {room_code}, period {format_period(invoice.month, invoice.year)}, "
        f"total {format_money(invoice.total)}. Please pay."
    )


class ReminderService(BaseService):
    """
    Sends a debt reminder for one invoice.

    Transports are injected so callers (and tests) can swap them; by default
    they are built from application settings.
    """

    def __init__(
        self,
        db: Session,
        mailer: Optional[SmtpMailer] = None,
        sms_sender: Optional[SmsGatewaySender] = None,
    ):
        super().__init__(db)
        self.invoices = InvoiceRepository(db)
        self.mailer = mailer or SmtpMailer()
        self.sms_sender = sms_sender or SmsGatewaySender()

    def send_reminder(self, invoice_id: int, channel: Any) -> ServiceResult[Invoice]:
        """
        Validate, deliver and record a reminder.

        Returns:
            Success carrying the updated invoice, or a failure whose message
            describes the first rejection encountered or the transport error
        """
        parsed = ReminderChannel.parse(channel)
        if parsed is None:
            return ServiceResult.rejected(ErrorCode.VALIDATION_ERROR, INVALID_CHANNEL, {"channel": channel})

        invoice = self.invoices.find_with_details(invoice_id)
        if invoice is None:
            return ServiceResult.rejected(ErrorCode.NOT_FOUND, INVOICE_NOT_FOUND, {"invoice_id": invoice_id})

        if invoice.tenant is None:
            return ServiceResult.rejected(ErrorCode.MISSING_REQUIRED_FIELD, NO_TENANT, {"invoice_id": invoice_id})

        if invoice.status == InvoiceStatus.PAID:
            return ServiceResult.rejected(ErrorCode.INVALID_STATE, ALREADY_PAID, {"invoice_id": invoice_id})

        if parsed == ReminderChannel.EMAIL:
            return self._send_email(invoice)
        return self._send_sms(invoice)

    def _send_email(self, invoice: Invoice) -> ServiceResult[Invoice]:
        address = (invoice.tenant.email or "").strip()
        if not address:
            return ServiceResult.rejected(ErrorCode.MISSING_REQUIRED_FIELD, NO_EMAIL, {"tenant_id": invoice.tenant_id})

        body = build_email_body(invoice)
        self._logger.info(
            "Sending email reminder",
            extra={"invoice_id": invoice.id, "recipient": address, "period": invoice.period_label()},
        )
        try:
            self.mailer.send(address, build_email_subject(invoice), body)
        except EmailError as e:
            return self._handle_exception(e, "send email reminder", invoice.id)

        invoice.last_reminder_email_at = utc_now()
        invoice.reminder_email_count = (invoice.reminder_email_count or 0) + 1
        invoice.last_reminder_email_message = body
        self.commit()
        return ServiceResult.success(invoice, message="Email reminder sent.")

    def _send_sms(self, invoice: Invoice) -> ServiceResult[Invoice]:
        phone = (invoice.tenant.phone or "").strip()
        if not phone:
            return ServiceResult.rejected(ErrorCode.MISSING_REQUIRED_FIELD, NO_PHONE, {"tenant_id": invoice.tenant_id})

        text = build_sms_text(invoice)
        self._logger.info(
            "Sending SMS reminder",
            extra={"invoice_id": invoice.id, "phone": phone, "period": invoice.period_label()},
        )
        try:
            self.sms_sender.send(phone, text)
        except SMSError as e:
            return self._handle_exception(e, "send SMS reminder", invoice.id)

        invoice.last_reminder_sms_at = utc_now()
        invoice.reminder_sms_count = (invoice.reminder_sms_count or 0) + 1
        invoice.last_reminder_sms_message = text
        self.commit()
        return ServiceResult.success(invoice, message="SMS reminder sent.")
