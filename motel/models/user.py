"""
User model.

API account with a role; tenants may be linked to one.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, Enum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from motel.models.base import BaseModel
from motel.schemas.common.enums import UserRole

if TYPE_CHECKING:
    from motel.models.tenant import Tenant


class User(BaseModel):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole, name="user_role_enum"),
        nullable=False,
        default=UserRole.TENANT,
    )
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    tenant: Mapped[Optional["Tenant"]] = relationship(back_populates="user", uselist=False)

    @property
    def tenant_id(self) -> Optional[int]:
        return self.tenant.id if self.tenant is not None else None
