"""
Tenant model.

Personal details of a renter, optionally linked one-to-one to a user account.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from motel.models.base import BaseModel

if TYPE_CHECKING:
    from motel.models.user import User


class Tenant(BaseModel):
    __tablename__ = "tenants"

    full_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    phone: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    id_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    portrait_image_path: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    id_card_image_path: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    user_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        unique=True,
    )

    user: Mapped[Optional["User"]] = relationship(back_populates="tenant")
