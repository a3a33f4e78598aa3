"""
Payment model.

Append-only money received against an invoice.
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, Enum, ForeignKey, Numeric
from sqlalchemy.orm import Mapped, mapped_column, relationship

from motel.models.base import BaseModel, utc_now
from motel.schemas.common.enums import PaymentMethod

if TYPE_CHECKING:
    from motel.models.invoice import Invoice


class Payment(BaseModel):
    __tablename__ = "payments"

    invoice_id: Mapped[int] = mapped_column(ForeignKey("invoices.id"), nullable=False, index=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(precision=12, scale=2), nullable=False)
    paid_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utc_now)
    method: Mapped[PaymentMethod] = mapped_column(
        Enum(PaymentMethod, name="payment_method_enum"),
        nullable=False,
        default=PaymentMethod.CASH,
    )

    invoice: Mapped["Invoice"] = relationship(back_populates="payments")
