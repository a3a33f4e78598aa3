"""
Invoice schemas, including reminder and generation payloads.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, List, Optional

from pydantic import Field

from motel.schemas.common.base import BaseResponseSchema, BaseSchema
from motel.schemas.common.enums import InvoiceStatus
from motel.schemas.room import RoomSummary
from motel.schemas.tenant import TenantSummary

__all__ = [
    "InvoiceResponse",
    "ReminderRequest",
    "ReminderResponse",
    "MonthlyGenerationResult",
    "GenerationResponse",
]


class InvoiceResponse(BaseResponseSchema):
    room_id: int
    tenant_id: Optional[int] = None
    month: int
    year: int
    room_cost: Decimal
    electricity_cost: Decimal
    water_cost: Decimal
    total: Decimal
    status: InvoiceStatus
    created_at: datetime

    last_reminder_email_at: Optional[datetime] = None
    reminder_email_count: int = 0
    last_reminder_email_message: Optional[str] = None
    last_reminder_sms_at: Optional[datetime] = None
    reminder_sms_count: int = 0
    last_reminder_sms_message: Optional[str] = None

    room: Optional[RoomSummary] = None
    tenant: Optional[TenantSummary] = None


class ReminderRequest(BaseSchema):
    """Channel is validated by the dispatcher so an unknown value is a 400 rejection."""

    channel: Optional[Any] = Field(None, description="'email' or 'sms' (case-insensitive)")


class ReminderResponse(BaseSchema):
    message: str
    channel: Optional[str] = None


class MonthlyGenerationResult(BaseSchema):
    month: int
    year: int
    created: int


class GenerationResponse(BaseSchema):
    results: List[MonthlyGenerationResult]
    total_created: int
