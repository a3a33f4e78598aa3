"""
Email utilities: configuration, message structure, and SMTP-based sending.

This module provides:
- EmailMessage: validated email message dataclass.
- EmailConfig: configuration read from application settings.
- send_email: SMTP send with a bounded timeout.
- SmtpMailer: the transport used by the reminder dispatcher; a no-op
  when no SMTP host is configured.
"""

from __future__ import annotations

import smtplib
from dataclasses import dataclass
from email.mime.text import MIMEText

from motel.config.settings import Settings, settings as default_settings
from motel.core.logging import get_logger

logger = get_logger(__name__)


class EmailError(Exception):
    """Custom exception for email operations."""
    pass


@dataclass
class EmailMessage:
    """Email message structure with validation."""
    subject: str
    to: list[str]
    body_text: str
    from_email: str | None = None

    def __post_init__(self) -> None:
        if not self.subject.strip():
            raise EmailError("Subject cannot be empty")

        if not self.to:
            raise EmailError("At least one recipient is required")

        for address in self.to:
            if "@" not in address:
                raise EmailError(f"Invalid recipient email: {address}")


@dataclass
class EmailConfig:
    """Email configuration."""
    smtp_host: str | None
    smtp_port: int
    username: str | None
    password: str | None
    use_tls: bool = True
    from_email: str | None = None
    timeout: float = 10.0

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> EmailConfig:
        """Create email config from application settings."""
        settings = settings or default_settings
        return cls(
            smtp_host=settings.SMTP_HOST,
            smtp_port=settings.SMTP_PORT,
            username=settings.SMTP_USERNAME,
            password=settings.SMTP_PASSWORD,
            use_tls=settings.SMTP_USE_TLS,
            from_email=settings.MAIL_FROM,
            timeout=settings.MAIL_TIMEOUT_SECONDS,
        )

    def is_configured(self) -> bool:
        return bool(self.smtp_host and self.smtp_host.strip())


def send_email(message: EmailMessage, config: EmailConfig) -> None:
    """Send an email using SMTP."""
    try:
        msg = MIMEText(message.body_text, "plain", "utf-8")
        msg["Subject"] = message.subject
        msg["From"] = message.from_email or config.from_email or config.username or ""
        msg["To"] = ", ".join(message.to)

        with smtplib.SMTP(config.smtp_host, config.smtp_port, timeout=config.timeout) as server:
            if config.use_tls:
                server.starttls()

            if config.username and config.password:
                server.login(config.username, config.password)

            server.send_message(msg, to_addrs=message.to)

        logger.info(f"Email sent successfully to {len(message.to)} recipients")

    except (smtplib.SMTPException, OSError) as e:
        logger.error(f"Failed to send email: {e}")
        raise EmailError(f"Failed to send email: {e}") from e


class SmtpMailer:
    """Mail transport for reminders."""

    def __init__(self, config: EmailConfig | None = None):
        self.config = config or EmailConfig.from_settings()

    def is_configured(self) -> bool:
        return self.config.is_configured()

    def send(self, to: str, subject: str, body: str) -> bool:
        """
        Deliver one plain-text message.

        Returns:
            False when SMTP is not configured and nothing was sent.

        Raises:
            EmailError: On transport failure
        """
        if not self.is_configured():
            logger.info("SMTP not configured, email skipped", extra={"recipient": to})
            return False

        send_email(
            EmailMessage(subject=subject, to=[to.strip()], body_text=body),
            self.config,
        )
        return True
