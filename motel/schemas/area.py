"""
Area schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from motel.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseUpdateSchema,
)

__all__ = ["AreaCreate", "AreaUpdate", "AreaResponse", "AreaSummary"]


class AreaCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=100)
    address: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, max_length=500)


class AreaUpdate(BaseUpdateSchema):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    address: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = Field(None, max_length=500)


class AreaSummary(BaseResponseSchema):
    """Compact area embedded in room responses."""

    name: str


class AreaResponse(BaseResponseSchema):
    name: str
    address: Optional[str] = None
    description: Optional[str] = None
