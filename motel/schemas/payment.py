"""
Payment schemas.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from motel.schemas.common.base import BaseCreateSchema, BaseResponseSchema
from motel.schemas.common.enums import PaymentMethod

__all__ = ["PaymentCreate", "PaymentResponse"]


class PaymentCreate(BaseCreateSchema):
    invoice_id: int
    amount: Decimal = Field(..., gt=0, description="Amount received")
    method: PaymentMethod = PaymentMethod.CASH
    paid_at: Optional[datetime] = Field(None, description="Defaults to now")


class PaymentResponse(BaseResponseSchema):
    invoice_id: int
    amount: Decimal
    paid_at: datetime
    method: PaymentMethod
