"""
Support request schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from motel.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseUpdateSchema,
)
from motel.schemas.common.enums import SupportRequestStatus
from motel.schemas.tenant import TenantSummary

__all__ = ["SupportRequestCreate", "SupportRequestUpdate", "SupportRequestResponse"]


class SupportRequestCreate(BaseCreateSchema):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=4000)


class SupportRequestUpdate(BaseUpdateSchema):
    status: Optional[SupportRequestStatus] = None
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=4000)


class SupportRequestResponse(BaseResponseSchema):
    tenant_id: int
    title: str
    description: Optional[str] = None
    status: SupportRequestStatus
    created_at: datetime
    updated_at: datetime
    tenant: Optional[TenantSummary] = None
