"""
Authentication schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field

from motel.schemas.common.base import BaseSchema
from motel.schemas.common.enums import UserRole

__all__ = ["LoginRequest", "TokenResponse"]


class LoginRequest(BaseSchema):
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseSchema):
    """Bearer token issued on login."""

    access_token: str
    token_type: str = "bearer"
    username: str
    role: UserRole
    full_name: Optional[str] = None
