"""
Tenant schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import EmailStr, Field

from motel.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseUpdateSchema,
)

__all__ = ["TenantCreate", "TenantUpdate", "TenantResponse", "TenantSummary"]


class TenantCreate(BaseCreateSchema):
    full_name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    id_number: Optional[str] = Field(None, max_length=50, description="National ID number")
    address: Optional[str] = Field(None, max_length=200)
    email: Optional[EmailStr] = None
    portrait_image_path: Optional[str] = Field(None, max_length=255)
    id_card_image_path: Optional[str] = Field(None, max_length=255)
    user_id: Optional[int] = Field(None, description="Linked login account")


class TenantUpdate(BaseUpdateSchema):
    full_name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    id_number: Optional[str] = Field(None, max_length=50)
    address: Optional[str] = Field(None, max_length=200)
    email: Optional[EmailStr] = None
    portrait_image_path: Optional[str] = Field(None, max_length=255)
    id_card_image_path: Optional[str] = Field(None, max_length=255)
    user_id: Optional[int] = None


class TenantSummary(BaseResponseSchema):
    full_name: str
    phone: Optional[str] = None


class TenantResponse(BaseResponseSchema):
    full_name: str
    phone: Optional[str] = None
    id_number: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None
    portrait_image_path: Optional[str] = None
    id_card_image_path: Optional[str] = None
    user_id: Optional[int] = None
