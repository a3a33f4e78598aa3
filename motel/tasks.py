"""
Scheduled jobs.

Each Celery task opens its own session and delegates to a plain function
taking a session and a date, which is what the tests call.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from motel.core.background_tasks import INVOICE_GENERATION_TASK, PAYMENT_DUE_TASK, celery_app
from motel.core.logging import get_job_logger
from motel.db.session import session_scope
from motel.schemas.invoice import MonthlyGenerationResult
from motel.services.billing_service import BillingService
from motel.services.notification_service import NotificationService


def run_invoice_generation(db: Session, today: Optional[date] = None) -> List[MonthlyGenerationResult]:
    """Generate invoices for the previous and the current month."""
    log = get_job_logger(__name__, job="invoice-generation")
    results = BillingService(db).generate_for_recent_months(today)
    for result in results:
        log.info("period processed", period=f"{result.month}/{result.year}", created=result.created)
    return results


def run_payment_due_reminders(db: Session, today: Optional[date] = None) -> int:
    count = NotificationService(db).remind_payment_due(today)
    get_job_logger(__name__, job="payment-due").info("reminders queued", notifications=count)
    return count


@celery_app.task(name=INVOICE_GENERATION_TASK)
def generate_monthly_invoices() -> None:
    """Counts are logged and discarded; a failed run is retried by the next schedule."""
    with session_scope() as db:
        run_invoice_generation(db)


@celery_app.task(name=PAYMENT_DUE_TASK)
def remind_payment_due() -> int:
    with session_scope() as db:
        return run_payment_due_reminders(db)
