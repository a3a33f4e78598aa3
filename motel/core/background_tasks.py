"""
Background Task Management

Celery application and beat schedule for the recurring billing jobs.
"""

from celery import Celery
from celery.schedules import crontab

from motel.config.settings import Settings, settings
from motel.core.logging import get_logger

logger = get_logger(__name__)

INVOICE_GENERATION_TASK = "motel.tasks.generate_monthly_invoices"
PAYMENT_DUE_TASK = "motel.tasks.remind_payment_due"


def build_beat_schedule(config: Settings = settings) -> dict:
    """Periodic tasks keyed by schedule entry name."""
    return {
        "generate-monthly-invoices": {
            "task": INVOICE_GENERATION_TASK,
            "schedule": crontab(hour=config.INVOICE_JOB_HOUR, minute=config.INVOICE_JOB_MINUTE),
        },
        "remind-payment-due": {
            "task": PAYMENT_DUE_TASK,
            "schedule": crontab(hour=config.PAYMENT_NUDGE_HOUR, minute=config.PAYMENT_NUDGE_MINUTE),
        },
    }


def create_celery_app(config: Settings = settings) -> Celery:
    """Initialize Celery application"""
    app = Celery(
        "motel_tasks",
        broker=config.CELERY_BROKER_URL,
        backend=config.CELERY_RESULT_BACKEND,
        include=["motel.tasks"],
    )

    app.conf.update(
        task_serializer="json",
        accept_content=["json"],
        result_serializer="json",
        timezone=config.TIMEZONE,
        enable_utc=True,
        task_track_started=True,
        worker_prefetch_multiplier=1,
        task_acks_late=True,
    )
    app.conf.beat_schedule = build_beat_schedule(config)

    logger.debug("Celery application configured", extra={"schedules": list(app.conf.beat_schedule)})
    return app


celery_app = create_celery_app()
