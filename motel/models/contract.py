"""
Contract model.

A lease linking one room and one tenant. At most one ACTIVE contract may
reference a room; the partial unique index enforces it in the database.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Date, DateTime, Enum, ForeignKey, Index, Numeric, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from motel.models.base import BaseModel, utc_now
from motel.models.room import Room
from motel.models.tenant import Tenant
from motel.schemas.common.enums import ContractStatus


class Contract(BaseModel):
    __tablename__ = "contracts"
    __table_args__ = (
        Index(
            "uq_contracts_active_room",
            "room_id",
            unique=True,
            sqlite_where=text("status = 'ACTIVE'"),
            postgresql_where=text("status = 'ACTIVE'"),
        ),
    )

    room_id: Mapped[int] = mapped_column(ForeignKey("rooms.id"), nullable=False, index=True)
    tenant_id: Mapped[int] = mapped_column(ForeignKey("tenants.id"), nullable=False, index=True)
    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    status: Mapped[ContractStatus] = mapped_column(
        Enum(ContractStatus, name="contract_status_enum"),
        nullable=False,
        default=ContractStatus.ACTIVE,
        index=True,
    )
    deposit: Mapped[Optional[Decimal]] = mapped_column(Numeric(precision=12, scale=2), nullable=True)
    rent: Mapped[Optional[Decimal]] = mapped_column(Numeric(precision=12, scale=2), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utc_now)

    room: Mapped[Room] = relationship()
    tenant: Mapped[Tenant] = relationship()
