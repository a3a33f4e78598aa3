"""
Report endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from motel.core.dependencies import ActorContext, get_db, require
from motel.core.permissions import Operation
from motel.schemas.report import (
    DashboardSummary,
    DebtDetailReport,
    DebtReport,
    InvoiceSummaryReport,
    OccupancyReport,
    RevenueReport,
    VacantRoomsReport,
    YearRevenueReport,
)
from motel.services.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])


@router.get("/revenue", response_model=RevenueReport)
def revenue(
    month: int = Query(..., ge=1, le=12),
    year: int = Query(...),
    actor: ActorContext = Depends(require(Operation.REPORT_READ)),
    db: Session = Depends(get_db),
):
    return ReportService(db).revenue(month, year)


@router.get("/revenue-year", response_model=YearRevenueReport)
def revenue_for_year(
    year: int = Query(...),
    actor: ActorContext = Depends(require(Operation.REPORT_READ)),
    db: Session = Depends(get_db),
):
    return ReportService(db).revenue_for_year(year)


@router.get("/vacant", response_model=VacantRoomsReport)
def vacant_rooms(
    actor: ActorContext = Depends(require(Operation.REPORT_READ)),
    db: Session = Depends(get_db),
):
    return ReportService(db).vacant_rooms()


@router.get("/debt", response_model=DebtReport)
def debt(
    actor: ActorContext = Depends(require(Operation.REPORT_READ)),
    db: Session = Depends(get_db),
):
    return ReportService(db).debt()


@router.get("/debt-detail", response_model=DebtDetailReport)
def debt_detail(
    actor: ActorContext = Depends(require(Operation.REPORT_READ)),
    db: Session = Depends(get_db),
):
    return ReportService(db).debt_detail()


@router.get("/occupancy", response_model=OccupancyReport)
def occupancy(
    actor: ActorContext = Depends(require(Operation.REPORT_READ)),
    db: Session = Depends(get_db),
):
    return ReportService(db).occupancy()


@router.get("/invoice-summary", response_model=InvoiceSummaryReport)
def invoice_summary(
    month: int = Query(..., ge=1, le=12),
    year: int = Query(...),
    actor: ActorContext = Depends(require(Operation.REPORT_READ)),
    db: Session = Depends(get_db),
):
    return ReportService(db).invoice_summary(month, year)


@router.get("/summary", response_model=DashboardSummary)
def summary(
    month: Optional[int] = Query(None, ge=1, le=12),
    year: Optional[int] = Query(None),
    actor: ActorContext = Depends(require(Operation.REPORT_READ)),
    db: Session = Depends(get_db),
):
    return ReportService(db).summary(month, year)
