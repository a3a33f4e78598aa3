from datetime import date

from motel.core.background_tasks import INVOICE_GENERATION_TASK, PAYMENT_DUE_TASK, build_beat_schedule
from motel.models import Notification
from motel.schemas.common.enums import InvoiceStatus, UserRole
from motel.tasks import run_invoice_generation, run_payment_due_reminders


def test_beat_schedule_registers_both_jobs():
    tasks = {entry["task"] for entry in build_beat_schedule().values()}
    assert tasks == {INVOICE_GENERATION_TASK, PAYMENT_DUE_TASK}


def test_invoice_generation_job_is_idempotent(db, factory):
    factory.contract(factory.room("T1"), factory.tenant())

    first = run_invoice_generation(db, today=date(2024, 3, 2))
    second = run_invoice_generation(db, today=date(2024, 3, 2))

    assert sum(r.created for r in first) == 2
    assert sum(r.created for r in second) == 0


def test_payment_due_job_notifies_linked_users_only(db, factory):
    user = factory.user("linked", UserRole.TENANT)
    linked = factory.tenant(full_name="Linked", user=user)
    unlinked = factory.tenant(full_name="Unlinked")
    factory.invoice(factory.room("T2"), linked, month=4, year=2024)
    factory.invoice(factory.room("T3"), unlinked, month=4, year=2024)
    factory.invoice(factory.room("T4"), linked, month=3, year=2024, status=InvoiceStatus.PAID)

    created = run_payment_due_reminders(db, today=date(2024, 5, 5))

    assert created == 1
    notification = db.query(Notification).one()
    assert notification.user_id == user.id
    assert notification.message == "Payment reminder for invoice 4/2024 for room T2 on 2024-05-05"
