"""
Billing engine.

Keeps exactly one invoice per (room, month, year). Invoices are created or
refreshed from meter readings, and a baseline invoice is generated for
every room under an ACTIVE contract by the monthly job.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from motel.models.invoice import Invoice
from motel.models.meter_reading import MeterReading
from motel.models.room import Room
from motel.repositories.contract_repository import ContractRepository
from motel.repositories.invoice_repository import InvoiceRepository
from motel.repositories.meter_reading_repository import MeterReadingRepository
from motel.repositories.room_repository import RoomRepository
from motel.schemas.common.enums import InvoiceStatus
from motel.schemas.invoice import MonthlyGenerationResult
from motel.services.base.base_service import BaseService

ZERO = Decimal("0")


def previous_month(today: date) -> tuple:
    """(month, year) of the calendar month before ``today``."""
    if today.month == 1:
        return 12, today.year - 1
    return today.month - 1, today.year


class BillingService(BaseService):
    """Invoice creation and refresh."""

    def __init__(self, db: Session):
        super().__init__(db)
        self.invoices = InvoiceRepository(db)
        self.contracts = ContractRepository(db)
        self.readings = MeterReadingRepository(db)
        self.rooms = RoomRepository(db)

    @staticmethod
    def _apply_costs(
        invoice: Invoice,
        room_cost: Decimal,
        electricity_cost: Decimal,
        water_cost: Decimal,
    ) -> None:
        invoice.room_cost = room_cost
        invoice.electricity_cost = electricity_cost
        invoice.water_cost = water_cost
        invoice.total = room_cost + electricity_cost + water_cost

    def upsert_invoice_from_reading(
        self,
        reading: MeterReading,
        room: Optional[Room] = None,
    ) -> Invoice:
        """
        Create or refresh the invoice for the reading's room and period.

        Cost fields are replaced on every call so a corrected reading
        overwrites the previous figures. The tenant is taken from the
        room's ACTIVE contract when there is one and left as is otherwise.
        The caller commits.
        """
        room = room or self.rooms.get_by_id(reading.room_id)
        room_cost = room.current_price or ZERO
        contract = self.contracts.active_for_room(room.id)

        invoice = self.invoices.find_by_room_period(
            room.id, reading.month, reading.year, for_update=True
        )

        if invoice is None:
            invoice = Invoice(
                room_id=room.id,
                tenant_id=contract.tenant_id if contract else None,
                month=reading.month,
                year=reading.year,
                status=InvoiceStatus.UNPAID,
            )
            self._apply_costs(invoice, room_cost, reading.electricity_cost, reading.water_cost)
            if self.invoices.insert_if_absent(invoice):
                self._logger.info(
                    "Invoice created from meter reading",
                    extra={"invoice_id": invoice.id, "room_id": room.id, "period": invoice.period_label()},
                )
                return invoice

            # Created concurrently; refresh that row instead
            invoice = self.invoices.find_by_room_period(
                room.id, reading.month, reading.year, for_update=True
            )

        self._apply_costs(invoice, room_cost, reading.electricity_cost, reading.water_cost)
        if contract is not None:
            invoice.tenant_id = contract.tenant_id
        self.db.flush()

        self._logger.info(
            "Invoice refreshed from meter reading",
            extra={"invoice_id": invoice.id, "room_id": room.id, "period": invoice.period_label()},
        )
        return invoice

    def generate_invoices_for_month(self, month: int, year: int) -> int:
        """
        Create a baseline invoice for each room under an ACTIVE contract.

        Rooms already invoiced for the period are skipped, so repeated runs
        never duplicate. Utility costs come from the latest reading for the
        room and period, zero when none was recorded.

        Returns:
            Number of invoices created
        """
        created = 0

        for contract in self.contracts.find_active():
            room = contract.room
            if self.invoices.find_by_room_period(room.id, month, year) is not None:
                continue

            reading = self.readings.latest_for_room_period(room.id, month, year)
            invoice = Invoice(
                room_id=room.id,
                tenant_id=contract.tenant_id,
                month=month,
                year=year,
                status=InvoiceStatus.UNPAID,
            )
            self._apply_costs(
                invoice,
                room.current_price or ZERO,
                reading.electricity_cost if reading else ZERO,
                reading.water_cost if reading else ZERO,
            )
            if self.invoices.insert_if_absent(invoice):
                created += 1

        self.commit()
        self._logger.info(
            "Monthly invoices generated",
            extra={"period": f"{month}/{year}", "invoices_created": created},
        )
        return created

    def generate_for_recent_months(self, today: Optional[date] = None) -> List[MonthlyGenerationResult]:
        """Run generation for the previous calendar month, then the current one."""
        today = today or date.today()
        periods = [previous_month(today), (today.month, today.year)]

        return [
            MonthlyGenerationResult(
                month=month,
                year=year,
                created=self.generate_invoices_for_month(month, year),
            )
            for month, year in periods
        ]
