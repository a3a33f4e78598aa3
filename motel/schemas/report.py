"""
Report schemas.

Revenue counts PAID invoices only; debt counts UNPAID invoices only.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from motel.schemas.common.base import BaseSchema
from motel.schemas.common.enums import InvoiceStatus

__all__ = [
    "RevenueReport",
    "MonthRevenue",
    "YearRevenueReport",
    "VacantRoom",
    "VacantRoomsReport",
    "DebtReport",
    "DebtLine",
    "DebtDetailReport",
    "OccupancyReport",
    "InvoiceSummaryReport",
    "DashboardSummary",
]


class RevenueReport(BaseSchema):
    month: int
    year: int
    revenue: Decimal


class MonthRevenue(BaseSchema):
    month: int
    revenue: Decimal


class YearRevenueReport(BaseSchema):
    year: int
    months: List[MonthRevenue]
    total: Decimal


class VacantRoom(BaseSchema):
    id: int
    code: str
    floor: Optional[str] = None
    current_price: Optional[Decimal] = None


class VacantRoomsReport(BaseSchema):
    vacant_rooms: int
    rooms: List[VacantRoom]


class DebtReport(BaseSchema):
    total_debt: Decimal
    count: int


class DebtLine(BaseSchema):
    id: int
    room_code: Optional[str] = None
    tenant_name: Optional[str] = None
    month: int
    year: int
    total: Decimal
    status: InvoiceStatus


class DebtDetailReport(DebtReport):
    invoices: List[DebtLine]


class OccupancyReport(BaseSchema):
    total_rooms: int
    available: int
    occupied: int
    maintenance: int
    occupancy_rate_percent: float


class InvoiceSummaryReport(BaseSchema):
    month: int
    year: int
    count_paid: int
    count_unpaid: int
    count_partial: int
    count_total: int
    sum_paid: Decimal
    sum_unpaid: Decimal
    sum_partial: Decimal
    sum_total: Decimal


class DashboardSummary(BaseSchema):
    month: int
    year: int
    revenue_month: Decimal
    vacant_rooms: int
    total_debt: Decimal
    unpaid_count: int
    occupancy_rate_percent: float
