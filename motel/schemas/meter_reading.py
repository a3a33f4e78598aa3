"""
Meter reading schemas.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import Field

from motel.schemas.common.base import BaseCreateSchema, BaseResponseSchema

__all__ = ["MeterReadingCreate", "MeterReadingResponse"]


class MeterReadingCreate(BaseCreateSchema):
    """
    Raw counters for one room and billing period.

    A new counter lower than the old one yields zero usage, not an error.
    """

    room_id: int
    month: int = Field(..., ge=1, le=12)
    year: int = Field(..., ge=2000, le=9999)
    old_electric: int = Field(0, ge=0)
    new_electric: int = Field(0, ge=0)
    old_water: int = Field(0, ge=0)
    new_water: int = Field(0, ge=0)


class MeterReadingResponse(BaseResponseSchema):
    room_id: int
    month: int
    year: int
    old_electric: int
    new_electric: int
    old_water: int
    new_water: int
    electricity_cost: Decimal
    water_cost: Decimal
    total_cost: Decimal
    created_at: datetime
