"""
Invoice model.

One invoice per (room, month, year). The row is the aggregation point for
billing costs, settlement status and reminder bookkeeping.
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from motel.models.base import BaseModel, utc_now
from motel.models.room import Room
from motel.models.tenant import Tenant
from motel.schemas.common.enums import InvoiceStatus

if TYPE_CHECKING:
    from motel.models.payment import Payment


class Invoice(BaseModel):
    __tablename__ = "invoices"
    __table_args__ = (
        UniqueConstraint("room_id", "month", "year", name="uq_invoices_room_period"),
    )

    room_id: Mapped[int] = mapped_column(ForeignKey("rooms.id"), nullable=False, index=True)
    tenant_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("tenants.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    month: Mapped[int] = mapped_column(Integer, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)

    room_cost: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False, default=Decimal("0"))
    electricity_cost: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False, default=Decimal("0"))
    water_cost: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False, default=Decimal("0"))
    total: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False, default=Decimal("0"))

    status: Mapped[InvoiceStatus] = mapped_column(
        Enum(InvoiceStatus, name="invoice_status_enum"),
        nullable=False,
        default=InvoiceStatus.UNPAID,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utc_now)

    # Reminder bookkeeping, one set per channel
    last_reminder_email_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    reminder_email_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_reminder_email_message: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)
    last_reminder_sms_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    reminder_sms_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_reminder_sms_message: Mapped[Optional[str]] = mapped_column(String(1000), nullable=True)

    room: Mapped[Room] = relationship()
    tenant: Mapped[Optional[Tenant]] = relationship()
    payments: Mapped[List["Payment"]] = relationship(
        back_populates="invoice",
        order_by="Payment.paid_at",
    )

    def period_label(self) -> str:
        return f"{self.month}/{self.year}"
