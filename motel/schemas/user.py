"""
User account schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from motel.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseSchema, BaseUpdateSchema
from motel.schemas.common.enums import UserRole

__all__ = ["UserCreate", "UserUpdate", "UserTenantLink", "RegisterRequest", "UserResponse"]


class UserCreate(BaseCreateSchema):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=128)
    full_name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    role: UserRole = Field(UserRole.TENANT, description="Role granted to the account")
    active: bool = True
    tenant_id: Optional[int] = Field(None, description="Existing tenant to link; TENANT accounts only")


class UserUpdate(BaseUpdateSchema):
    full_name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    role: Optional[UserRole] = None
    active: Optional[bool] = None
    password: Optional[str] = Field(None, max_length=128, description="Blank keeps the current password")


class UserTenantLink(BaseSchema):
    """Tenant to link to the account; null unlinks."""

    tenant_id: Optional[int] = None


class RegisterRequest(BaseSchema):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6, max_length=128)
    full_name: str = Field(..., min_length=1, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)
    role: UserRole = UserRole.TENANT


class UserResponse(BaseResponseSchema):
    username: str
    full_name: Optional[str] = None
    phone: Optional[str] = None
    role: UserRole
    active: bool
    tenant_id: Optional[int] = None
