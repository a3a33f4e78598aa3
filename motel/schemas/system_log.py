"""
Audit trail schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from motel.schemas.common.base import BaseResponseSchema

__all__ = ["SystemLogResponse"]


class SystemLogResponse(BaseResponseSchema):
    actor_id: Optional[int] = None
    action: str
    entity_type: Optional[str] = None
    entity_id: Optional[int] = None
    detail: Optional[str] = None
    created_at: datetime
