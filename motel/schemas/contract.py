"""
Lease contract schemas.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, model_validator

from motel.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseSchema
from motel.schemas.common.enums import ContractStatus
from motel.schemas.room import RoomSummary
from motel.schemas.tenant import TenantSummary

__all__ = ["ContractCreate", "ContractExtend", "ContractResponse"]


class ContractCreate(BaseCreateSchema):
    room_id: int
    tenant_id: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    deposit: Optional[Decimal] = Field(None, ge=0)
    rent: Optional[Decimal] = Field(None, ge=0, description="Agreed monthly rent")

    @model_validator(mode="after")
    def validate_dates(self) -> "ContractCreate":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class ContractExtend(BaseSchema):
    end_date: date = Field(..., description="New end date of the lease")


class ContractResponse(BaseResponseSchema):
    room_id: int
    tenant_id: int
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: ContractStatus
    deposit: Optional[Decimal] = None
    rent: Optional[Decimal] = None
    created_at: datetime
    room: Optional[RoomSummary] = None
    tenant: Optional[TenantSummary] = None
