"""
SMS utilities:
- SMS gateway configuration read from application settings.
- Outbound delivery as a JSON POST with bearer authorization over httpx.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

import httpx

from motel.config.settings import Settings, settings as default_settings
from motel.core.logging import get_logger

logger = get_logger(__name__)


class SMSError(Exception):
    """Base exception for SMS operations."""
    pass


class SMSValidationError(SMSError):
    """SMS validation error."""
    pass


class SMSDeliveryError(SMSError):
    """SMS delivery error."""
    pass


@dataclass
class SMSMessage:
    """SMS message structure with validation."""
    phone: str
    message: str

    def __post_init__(self) -> None:
        self.phone = self.phone.strip()
        if not self.phone:
            raise SMSValidationError("Phone number cannot be empty")
        if not self.message or not self.message.strip():
            raise SMSValidationError("SMS message cannot be empty")

    def to_payload(self) -> dict:
        return {"phone": self.phone, "message": self.message}


@dataclass
class SMSResult:
    """Result of SMS sending operation."""
    success: bool
    skipped: bool = False
    status_code: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class SMSConfig:
    """SMS gateway configuration."""
    enabled: bool
    api_url: str | None
    api_key: str | None = None
    timeout: float = 10.0

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> SMSConfig:
        settings = settings or default_settings
        return cls(
            enabled=settings.SMS_ENABLED,
            api_url=settings.SMS_API_URL,
            api_key=settings.SMS_API_KEY,
            timeout=settings.SMS_TIMEOUT_SECONDS,
        )

    def is_configured(self) -> bool:
        return self.enabled and bool(self.api_url and self.api_url.strip())


class SmsGatewaySender:
    """
    Sends SMS through an HTTP gateway.

    The gateway receives ``{"phone": ..., "message": ...}`` as JSON with
    ``Authorization: Bearer <api_key>`` when a key is set. When the gateway
    is not configured the send is skipped and reported as a success.
    """

    def __init__(self, config: SMSConfig | None = None, client: httpx.Client | None = None):
        self.config = config or SMSConfig.from_settings()
        self._client = client

    def is_configured(self) -> bool:
        return self.config.is_configured()

    def _headers(self) -> dict:
        headers = {"Content-Type": "application/json"}
        if self.config.api_key and self.config.api_key.strip():
            headers["Authorization"] = f"Bearer {self.config.api_key.strip()}"
        return headers

    def send(self, phone: str, message: str) -> SMSResult:
        """
        Raises:
            SMSDeliveryError: On connection failure, timeout or a non-2xx reply
        """
        sms = SMSMessage(phone=phone, message=message)

        if not self.is_configured():
            logger.info("SMS not configured, send skipped", extra={"phone": sms.phone})
            return SMSResult(success=True, skipped=True)

        try:
            if self._client is not None:
                response = self._client.post(
                    self.config.api_url,
                    json=sms.to_payload(),
                    headers=self._headers(),
                    timeout=self.config.timeout,
                )
            else:
                with httpx.Client(timeout=self.config.timeout) as client:
                    response = client.post(
                        self.config.api_url,
                        json=sms.to_payload(),
                        headers=self._headers(),
                    )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"SMS gateway rejected message: {e.response.status_code}")
            raise SMSDeliveryError(
                f"SMS gateway returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"SMS send failed: {e}")
            raise SMSDeliveryError(f"SMS send failed: {e}") from e

        logger.info("SMS sent", extra={"phone": sms.phone, "status_code": response.status_code})
        return SMSResult(success=True, status_code=response.status_code)
