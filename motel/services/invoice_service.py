"""
Invoice queries and the manual status override.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from motel.core.exceptions import ResourceNotFoundError
from motel.models.invoice import Invoice
from motel.repositories.invoice_repository import InvoiceRepository
from motel.schemas.common.enums import InvoiceStatus
from motel.services.base.base_service import BaseService


class InvoiceService(BaseService):

    def __init__(self, db: Session):
        super().__init__(db)
        self.invoices = InvoiceRepository(db)

    def list_invoices(
        self,
        status: Optional[InvoiceStatus] = None,
        month: Optional[int] = None,
        year: Optional[int] = None,
    ) -> List[Invoice]:
        return self.invoices.list_with_details(status=status, month=month, year=year)

    def list_for_tenant(self, tenant_id: Optional[int]) -> List[Invoice]:
        """Invoices of a tenant; an actor without a tenant record has none."""
        if tenant_id is None:
            return []
        return self.invoices.list_for_tenant(tenant_id)

    def get_invoice(self, invoice_id: int) -> Invoice:
        invoice = self.invoices.find_with_details(invoice_id)
        if invoice is None:
            raise ResourceNotFoundError("Invoice", invoice_id)
        return invoice

    def set_status(self, invoice_id: int, status: InvoiceStatus) -> Invoice:
        """
        Overwrite the status of an invoice.

        Unlike payment reconciliation this may move the status backwards.
        """
        invoice = self.invoices.get_for_update(invoice_id)
        if invoice is None:
            raise ResourceNotFoundError("Invoice", invoice_id)

        previous = invoice.status
        invoice.status = status
        self.commit()

        self._logger.info(
            "Invoice status overridden",
            extra={"invoice_id": invoice_id, "status_before": previous.value, "status_after": status.value},
        )
        return self.get_invoice(invoice_id)
