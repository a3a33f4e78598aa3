"""
Service price schemas.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import Field

from motel.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseUpdateSchema,
)

__all__ = ["ServicePriceCreate", "ServicePriceUpdate", "ServicePriceResponse"]


class ServicePriceCreate(BaseCreateSchema):
    room_price: Optional[Decimal] = Field(None, ge=0)
    electricity_price: Optional[Decimal] = Field(None, ge=0, description="Price per kWh")
    water_price: Optional[Decimal] = Field(None, ge=0, description="Price per cubic metre")
    effective_from: date


class ServicePriceUpdate(BaseUpdateSchema):
    room_price: Optional[Decimal] = Field(None, ge=0)
    electricity_price: Optional[Decimal] = Field(None, ge=0)
    water_price: Optional[Decimal] = Field(None, ge=0)
    effective_from: Optional[date] = None


class ServicePriceResponse(BaseResponseSchema):
    room_price: Optional[Decimal] = None
    electricity_price: Optional[Decimal] = None
    water_price: Optional[Decimal] = None
    effective_from: date
