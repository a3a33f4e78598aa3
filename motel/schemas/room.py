"""
Room schemas.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import Field

from motel.schemas.area import AreaSummary
from motel.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseUpdateSchema,
)
from motel.schemas.common.enums import RoomStatus

__all__ = ["RoomCreate", "RoomUpdate", "RoomResponse", "RoomSummary"]


class RoomCreate(BaseCreateSchema):
    code: str = Field(..., min_length=1, max_length=30, description="Unique room code")
    floor: Optional[str] = Field(None, max_length=30)
    status: RoomStatus = RoomStatus.AVAILABLE
    area_id: Optional[int] = Field(None, description="Area the room belongs to")
    current_price: Optional[Decimal] = Field(None, ge=0, description="Monthly rent")
    area_size: Optional[Decimal] = Field(None, ge=0, description="Floor area in square metres")


class RoomUpdate(BaseUpdateSchema):
    code: Optional[str] = Field(None, min_length=1, max_length=30)
    floor: Optional[str] = Field(None, max_length=30)
    status: Optional[RoomStatus] = None
    area_id: Optional[int] = None
    current_price: Optional[Decimal] = Field(None, ge=0)
    area_size: Optional[Decimal] = Field(None, ge=0)


class RoomSummary(BaseResponseSchema):
    """Compact room embedded in invoice and contract responses."""

    code: str
    floor: Optional[str] = None


class RoomResponse(BaseResponseSchema):
    code: str
    floor: Optional[str] = None
    status: RoomStatus
    area_id: Optional[int] = None
    area: Optional[AreaSummary] = None
    current_price: Optional[Decimal] = None
    area_size: Optional[Decimal] = None
