"""
Payment Repository.
"""

from decimal import Decimal
from typing import List

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from motel.models.payment import Payment
from motel.repositories.base_repository import BaseRepository


class PaymentRepository(BaseRepository[Payment]):
    """Repository for payment operations."""

    def __init__(self, db: Session):
        super().__init__(Payment, db)

    def sum_for_invoice(self, invoice_id: int) -> Decimal:
        """Total received for an invoice, re-derived from stored rows."""
        stmt = select(func.coalesce(func.sum(Payment.amount), 0)).where(
            Payment.invoice_id == invoice_id
        )
        return Decimal(str(self.db.scalar(stmt) or 0))

    def list_for_invoice(self, invoice_id: int) -> List[Payment]:
        stmt = (
            select(Payment)
            .where(Payment.invoice_id == invoice_id)
            .order_by(Payment.paid_at, Payment.id)
        )
        return list(self.db.scalars(stmt).all())
