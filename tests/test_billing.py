import logging
from datetime import date
from decimal import Decimal

import pytest

from motel.core.exceptions import RepositoryError
from motel.models import Invoice
from motel.repositories.invoice_repository import InvoiceRepository
from motel.schemas.common.enums import ContractStatus, InvoiceStatus
from motel.services.billing_service import BillingService, previous_month


def _period_invoices(db, month, year):
    return db.query(Invoice).filter_by(month=month, year=year).all()


def test_previous_month_wraps_year():
    assert previous_month(date(2024, 1, 15)) == (12, 2023)
    assert previous_month(date(2024, 7, 1)) == (6, 2024)


def test_generation_skips_rooms_already_invoiced(db, factory):
    rooms = [factory.room(code) for code in ("A1", "A2", "A3")]
    for i, room in enumerate(rooms):
        factory.contract(room, factory.tenant(full_name=f"Tenant {i}"))
    factory.invoice(rooms[0], None, month=5, year=2024)

    service = BillingService(db)

    assert service.generate_invoices_for_month(5, 2024) == 2
    assert service.generate_invoices_for_month(5, 2024) == 0
    assert len(_period_invoices(db, 5, 2024)) == 3


def test_generation_ignores_ended_contracts(db, factory):
    room = factory.room("C1")
    tenant = factory.tenant()
    factory.contract(room, tenant, status=ContractStatus.ENDED)
    factory.contract(room, factory.tenant(full_name="Second"))

    assert BillingService(db).generate_invoices_for_month(2, 2024) == 1
    invoice = _period_invoices(db, 2, 2024)[0]
    assert invoice.tenant_id != tenant.id


def test_generation_uses_latest_reading_costs(db, factory):
    room = factory.room("D1", price="2000000")
    factory.contract(room, factory.tenant())
    factory.reading(room, 8, 2024, electricity_cost="100", water_cost="100")
    factory.reading(room, 8, 2024, electricity_cost="90000", water_cost="40000")

    BillingService(db).generate_invoices_for_month(8, 2024)

    invoice = _period_invoices(db, 8, 2024)[0]
    assert invoice.electricity_cost == Decimal("90000")
    assert invoice.water_cost == Decimal("40000")
    assert invoice.total == Decimal("2130000")
    assert invoice.status == InvoiceStatus.UNPAID


def test_generate_for_recent_months_covers_previous_and_current(db, factory):
    factory.contract(factory.room("E1"), factory.tenant())

    results = BillingService(db).generate_for_recent_months(date(2024, 1, 20))

    assert [(r.month, r.year, r.created) for r in results] == [(12, 2023, 1), (1, 2024, 1)]


def test_insert_if_absent_keeps_outer_transaction(db, factory):
    room = factory.room("F1")
    factory.invoice(room, None, month=9, year=2024)
    repo = InvoiceRepository(db)

    duplicate = Invoice(room_id=room.id, month=9, year=2024, total=Decimal("1"), status=InvoiceStatus.UNPAID)
    assert repo.insert_if_absent(duplicate) is False

    fresh = Invoice(room_id=room.id, month=10, year=2024, total=Decimal("1"), status=InvoiceStatus.UNPAID)
    assert repo.insert_if_absent(fresh) is True
    db.commit()
    assert len(db.query(Invoice).filter_by(room_id=room.id).all()) == 2


def test_insert_if_absent_raises_on_other_integrity_errors(db, factory):
    room = factory.room("F2")
    repo = InvoiceRepository(db)

    broken = Invoice(room_id=room.id, month=None, year=2024, total=Decimal("1"), status=InvoiceStatus.UNPAID)
    with pytest.raises(RepositoryError):
        repo.insert_if_absent(broken)

    assert repo.count({"room_id": room.id}) == 0


def test_generation_logs_created_count(db, factory, caplog):
    factory.contract(factory.room("G1"), factory.tenant())

    with caplog.at_level(logging.INFO):
        assert BillingService(db).generate_invoices_for_month(4, 2024) == 1

    record = next(r for r in caplog.records if r.getMessage() == "Monthly invoices generated")
    assert record.invoices_created == 1
    assert record.period == "4/2024"


def test_upsert_refreshes_row_inserted_concurrently(db, factory, monkeypatch):
    room = factory.room("H1", price="1000000")
    existing = factory.invoice(room, None, month=5, year=2024, total="1500000")
    reading = factory.reading(room, 5, 2024, electricity_cost="90000", water_cost="40000")
    service = BillingService(db)

    lookup = service.invoices.find_by_room_period
    calls = []

    def miss_first_lookup(*args, **kwargs):
        calls.append(args)
        return None if len(calls) == 1 else lookup(*args, **kwargs)

    monkeypatch.setattr(service.invoices, "find_by_room_period", miss_first_lookup)

    invoice = service.upsert_invoice_from_reading(reading, room)
    db.commit()

    assert invoice.id == existing.id
    assert invoice.total == Decimal("1130000")
    assert len(calls) == 2
    assert len(_period_invoices(db, 5, 2024)) == 1
