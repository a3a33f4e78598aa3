"""
Room model.

Status is reassigned by contract lifecycle events: creating a contract
marks the room OCCUPIED, ending it marks the room AVAILABLE.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import Enum, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from motel.models.area import Area
from motel.models.base import BaseModel
from motel.schemas.common.enums import RoomStatus


class Room(BaseModel):
    __tablename__ = "rooms"

    code: Mapped[str] = mapped_column(String(30), unique=True, nullable=False, index=True)
    floor: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    status: Mapped[RoomStatus] = mapped_column(
        Enum(RoomStatus, name="room_status_enum"),
        nullable=False,
        default=RoomStatus.AVAILABLE,
        index=True,
    )
    area_id: Mapped[Optional[int]] = mapped_column(ForeignKey("areas.id"), nullable=True, index=True)
    current_price: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=True,
        comment="Monthly room price used when billing",
    )
    area_size: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(precision=8, scale=2),
        nullable=True,
        comment="Floor area in square metres",
    )

    area: Mapped[Optional[Area]] = relationship()
