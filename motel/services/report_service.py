"""
Revenue, debt and occupancy reports.

Revenue sums the totals of PAID invoices; debt sums UNPAID invoices.
PARTIAL invoices appear only in the per-month invoice summary.
"""

from datetime import date
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from motel.repositories.invoice_repository import InvoiceRepository
from motel.repositories.room_repository import RoomRepository
from motel.schemas.common.enums import InvoiceStatus, RoomStatus
from motel.schemas.report import (
    DashboardSummary,
    DebtDetailReport,
    DebtLine,
    DebtReport,
    InvoiceSummaryReport,
    MonthRevenue,
    OccupancyReport,
    RevenueReport,
    VacantRoom,
    VacantRoomsReport,
    YearRevenueReport,
)
from motel.services.base.base_service import BaseService

ZERO = Decimal("0")


class ReportService(BaseService):

    def __init__(self, db: Session):
        super().__init__(db)
        self.invoices = InvoiceRepository(db)
        self.rooms = RoomRepository(db)

    def revenue(self, month: int, year: int) -> RevenueReport:
        return RevenueReport(
            month=month,
            year=year,
            revenue=self.invoices.sum_total(InvoiceStatus.PAID, month=month, year=year),
        )

    def revenue_for_year(self, year: int) -> YearRevenueReport:
        months = [
            MonthRevenue(month=m, revenue=self.invoices.sum_total(InvoiceStatus.PAID, month=m, year=year))
            for m in range(1, 13)
        ]
        return YearRevenueReport(
            year=year,
            months=months,
            total=sum((entry.revenue for entry in months), ZERO),
        )

    def vacant_rooms(self) -> VacantRoomsReport:
        rooms = self.rooms.find_by_status(RoomStatus.AVAILABLE)
        return VacantRoomsReport(
            vacant_rooms=len(rooms),
            rooms=[
                VacantRoom(id=r.id, code=r.code, floor=r.floor, current_price=r.current_price)
                for r in rooms
            ],
        )

    def debt(self) -> DebtReport:
        unpaid = self.invoices.list_with_details(status=InvoiceStatus.UNPAID)
        return DebtReport(
            total_debt=sum((i.total or ZERO for i in unpaid), ZERO),
            count=len(unpaid),
        )

    def debt_detail(self) -> DebtDetailReport:
        unpaid = self.invoices.list_with_details(status=InvoiceStatus.UNPAID)
        return DebtDetailReport(
            total_debt=sum((i.total or ZERO for i in unpaid), ZERO),
            count=len(unpaid),
            invoices=[
                DebtLine(
                    id=i.id,
                    room_code=i.room.code if i.room else None,
                    tenant_name=i.tenant.full_name if i.tenant else None,
                    month=i.month,
                    year=i.year,
                    total=i.total,
                    status=i.status,
                )
                for i in unpaid
            ],
        )

    def occupancy(self) -> OccupancyReport:
        counts = self.rooms.count_by_status()
        total = sum(counts.values())
        occupied = counts[RoomStatus.OCCUPIED]
        rate = (occupied * 100.0 / total) if total else 0.0
        return OccupancyReport(
            total_rooms=total,
            available=counts[RoomStatus.AVAILABLE],
            occupied=occupied,
            maintenance=counts[RoomStatus.MAINTENANCE],
            occupancy_rate_percent=round(rate, 1),
        )

    def invoice_summary(self, month: int, year: int) -> InvoiceSummaryReport:
        invoices = self.invoices.list_with_details(month=month, year=year)

        def total_of(status: Optional[InvoiceStatus]) -> Decimal:
            return sum(
                (i.total or ZERO for i in invoices if status is None or i.status == status),
                ZERO,
            )

        def count_of(status: InvoiceStatus) -> int:
            return sum(1 for i in invoices if i.status == status)

        return InvoiceSummaryReport(
            month=month,
            year=year,
            count_paid=count_of(InvoiceStatus.PAID),
            count_unpaid=count_of(InvoiceStatus.UNPAID),
            count_partial=count_of(InvoiceStatus.PARTIAL),
            count_total=len(invoices),
            sum_paid=total_of(InvoiceStatus.PAID),
            sum_unpaid=total_of(InvoiceStatus.UNPAID),
            sum_partial=total_of(InvoiceStatus.PARTIAL),
            sum_total=total_of(None),
        )

    def summary(self, month: Optional[int] = None, year: Optional[int] = None) -> DashboardSummary:
        """Dashboard figures; month and year default to the current ones."""
        today = date.today()
        month = month or today.month
        year = year or today.year
        debt = self.debt()
        return DashboardSummary(
            month=month,
            year=year,
            revenue_month=self.revenue(month, year).revenue,
            vacant_rooms=len(self.rooms.find_by_status(RoomStatus.AVAILABLE)),
            total_debt=debt.total_debt,
            unpaid_count=debt.count,
            occupancy_rate_percent=self.occupancy().occupancy_rate_percent,
        )
