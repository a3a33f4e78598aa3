"""
Invoice Repository.

Lookups by billing period, eager listings and revenue/debt aggregates.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from motel.core.exceptions import RepositoryError
from motel.core.logging import get_logger
from motel.models.invoice import Invoice
from motel.repositories.base_repository import BaseRepository
from motel.schemas.common.enums import InvoiceStatus

logger = get_logger(__name__)

PERIOD_CONSTRAINT = "uq_invoices_room_period"
# SQLite reports the columns instead of the constraint name
_PERIOD_COLUMNS = "invoices.room_id, invoices.month, invoices.year"


def violates_period_key(error: IntegrityError) -> bool:
    """True when ``error`` comes from the one-invoice-per-room-period key."""
    constraint = getattr(getattr(error.orig, "diag", None), "constraint_name", None)
    if constraint:
        return constraint == PERIOD_CONSTRAINT
    text = str(error.orig)
    return PERIOD_CONSTRAINT in text or _PERIOD_COLUMNS in text


class InvoiceRepository(BaseRepository[Invoice]):
    """Repository for invoice operations."""

    def __init__(self, db: Session):
        super().__init__(Invoice, db)

    def _with_details(self):
        return select(Invoice).options(
            joinedload(Invoice.room),
            joinedload(Invoice.tenant),
        )

    def find_by_room_period(
        self,
        room_id: int,
        month: int,
        year: int,
        for_update: bool = False,
    ) -> Optional[Invoice]:
        """
        Find the invoice of a room for a billing period.

        Args:
            for_update: Lock the row until the end of the transaction
        """
        stmt = select(Invoice).where(
            Invoice.room_id == room_id,
            Invoice.month == month,
            Invoice.year == year,
        )
        if for_update:
            stmt = stmt.with_for_update()
        return self.db.scalars(stmt).first()

    def get_for_update(self, invoice_id: int) -> Optional[Invoice]:
        """Load an invoice with a row lock (no-op on SQLite)."""
        stmt = select(Invoice).where(Invoice.id == invoice_id).with_for_update()
        return self.db.scalars(stmt).first()

    def find_with_details(self, invoice_id: int) -> Optional[Invoice]:
        stmt = self._with_details().where(Invoice.id == invoice_id)
        return self.db.scalars(stmt).first()

    def insert_if_absent(self, invoice: Invoice) -> bool:
        """
        Insert inside a SAVEPOINT.

        Returns:
            False when a row for the same (room, month, year) already exists;
            only the savepoint is rolled back and the outer transaction survives.

        Raises:
            RepositoryError: On any other integrity violation
        """
        try:
            with self.db.begin_nested():
                self.db.add(invoice)
                self.db.flush()
        except IntegrityError as e:
            if not violates_period_key(e):
                raise RepositoryError(f"Invoice insert failed: {e.orig}") from e
            logger.info(
                "Invoice already exists for period, insert skipped",
                extra={"room_id": invoice.room_id, "month": invoice.month, "year": invoice.year},
            )
            return False
        return True

    def list_with_details(
        self,
        status: Optional[InvoiceStatus] = None,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> List[Invoice]:
        """All invoices with room and tenant loaded, newest period first."""
        stmt = self._with_details()
        if status is not None:
            stmt = stmt.where(Invoice.status == status)
        if month is not None:
            stmt = stmt.where(Invoice.month == month)
        if year is not None:
            stmt = stmt.where(Invoice.year == year)
        stmt = stmt.order_by(Invoice.year.desc(), Invoice.month.desc(), Invoice.id)
        return list(self.db.scalars(stmt).unique().all())

    def list_for_tenant(self, tenant_id: int) -> List[Invoice]:
        stmt = (
            self._with_details()
            .where(Invoice.tenant_id == tenant_id)
            .order_by(Invoice.year.desc(), Invoice.month.desc(), Invoice.id)
        )
        return list(self.db.scalars(stmt).unique().all())

    def sum_total(
        self,
        status: InvoiceStatus,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> Decimal:
        """Sum of invoice totals with the given status, optionally within a period."""
        stmt = select(func.coalesce(func.sum(Invoice.total), 0)).where(Invoice.status == status)
        if month is not None:
            stmt = stmt.where(Invoice.month == month)
        if year is not None:
            stmt = stmt.where(Invoice.year == year)
        return Decimal(str(self.db.scalar(stmt) or 0))

    def count_by_status(self, month: int, year: int) -> dict:
        """Invoice count per status for one billing period."""
        stmt = (
            select(Invoice.status, func.count(Invoice.id))
            .where(Invoice.month == month, Invoice.year == year)
            .group_by(Invoice.status)
        )
        counts = {status: 0 for status in InvoiceStatus}
        for status, count in self.db.execute(stmt).all():
            counts[status] = count
        return counts
