"""
Notification schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from motel.schemas.common.base import BaseCreateSchema, BaseResponseSchema

__all__ = ["NotificationCreate", "NotificationResponse"]


class NotificationCreate(BaseCreateSchema):
    user_id: Optional[int] = Field(None, description="Recipient; omit to notify every active user")
    message: str = Field(..., min_length=1, max_length=1000)


class NotificationResponse(BaseResponseSchema):
    user_id: int
    message: str
    read_flag: bool
    sent_at: datetime
