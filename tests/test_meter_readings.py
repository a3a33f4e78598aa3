from datetime import date
from decimal import Decimal

import pytest

from motel.core.exceptions import InvalidReferenceError
from motel.models import Invoice
from motel.schemas.common.enums import InvoiceStatus
from motel.schemas.meter_reading import MeterReadingCreate
from motel.services.meter_reading_service import MeterReadingService, compute_charges, usage


def test_usage_clamps_counter_rollback_to_zero():
    assert usage(100, 150) == 50
    assert usage(80, 60) == 0
    assert usage(40, 40) == 0


def test_compute_charges_multiplies_usage_by_unit_price():
    charges = compute_charges(100, 150, 80, 60, Decimal("3000"), Decimal("10000"))

    assert charges.electric_usage == 50
    assert charges.water_usage == 0
    assert charges.electricity_cost == Decimal("150000")
    assert charges.water_cost == Decimal("0")
    assert charges.total_cost == Decimal("150000")


def test_compute_charges_without_prices_is_free():
    charges = compute_charges(0, 10, 0, 5, None, None)
    assert charges.total_cost == Decimal("0")


def test_unit_prices_use_latest_row_effective_by_first_of_month(db, factory):
    factory.price(date(2024, 1, 1), electricity="3000", water="10000")
    factory.price(date(2024, 3, 1), electricity="3500", water="12000")
    service = MeterReadingService(db)

    assert service.unit_prices(2, 2024) == (Decimal("3000"), Decimal("10000"))
    assert service.unit_prices(3, 2024) == (Decimal("3500"), Decimal("12000"))
    assert service.unit_prices(12, 2023) == (Decimal("0"), Decimal("0"))


def test_record_reading_creates_invoice_for_period(db, factory):
    factory.price(date(2024, 1, 1))
    room = factory.room("A101", price="1000000")
    tenant = factory.tenant()
    factory.contract(room, tenant)

    reading = MeterReadingService(db).record_reading(
        MeterReadingCreate(
            room_id=room.id, month=3, year=2024,
            old_electric=100, new_electric=150, old_water=10, new_water=12,
        )
    )

    assert reading.electricity_cost == Decimal("150000")
    assert reading.water_cost == Decimal("20000")
    assert reading.total_cost == Decimal("170000")

    invoices = db.query(Invoice).filter_by(room_id=room.id, month=3, year=2024).all()
    assert len(invoices) == 1
    invoice = invoices[0]
    assert invoice.tenant_id == tenant.id
    assert invoice.status == InvoiceStatus.UNPAID
    assert invoice.room_cost == Decimal("1000000")
    assert invoice.total == Decimal("1170000")


def test_corrected_reading_overwrites_invoice_costs(db, factory):
    factory.price(date(2024, 1, 1))
    room = factory.room("A102", price="1000000")
    factory.contract(room, factory.tenant())
    service = MeterReadingService(db)

    service.record_reading(MeterReadingCreate(room_id=room.id, month=4, year=2024, old_electric=0, new_electric=100))
    service.record_reading(MeterReadingCreate(room_id=room.id, month=4, year=2024, old_electric=0, new_electric=10))

    invoices = db.query(Invoice).filter_by(room_id=room.id, month=4, year=2024).all()
    assert len(invoices) == 1
    assert invoices[0].electricity_cost == Decimal("30000")
    assert invoices[0].total == Decimal("1030000")


def test_reading_for_vacant_room_leaves_tenant_empty(db, factory):
    room = factory.room("B201")

    MeterReadingService(db).record_reading(MeterReadingCreate(room_id=room.id, month=6, year=2024))

    invoice = db.query(Invoice).filter_by(room_id=room.id).one()
    assert invoice.tenant_id is None
    assert invoice.total == Decimal("1000000")


def test_reading_for_unknown_room_is_rejected(db):
    with pytest.raises(InvalidReferenceError):
        MeterReadingService(db).record_reading(MeterReadingCreate(room_id=999, month=1, year=2024))
