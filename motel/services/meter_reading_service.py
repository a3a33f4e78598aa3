"""
Meter reading processing.

Turns raw electric/water counters into utility costs using the unit prices
in force for the billing period, stores the reading and refreshes the
room's invoice for that period.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from motel.core.exceptions import InvalidReferenceError
from motel.models.meter_reading import MeterReading
from motel.repositories.meter_reading_repository import MeterReadingRepository
from motel.repositories.room_repository import RoomRepository
from motel.repositories.service_price_repository import ServicePriceRepository
from motel.schemas.meter_reading import MeterReadingCreate
from motel.services.base.base_service import BaseService
from motel.services.billing_service import BillingService

ZERO = Decimal("0")


@dataclass(frozen=True)
class UtilityCharges:
    electric_usage: int
    water_usage: int
    electricity_cost: Decimal
    water_cost: Decimal

    @property
    def total_cost(self) -> Decimal:
        return self.electricity_cost + self.water_cost


def usage(old: int, new: int) -> int:
    """Consumption between two counter values; a counter that went backwards counts as zero."""
    return max(0, new - old)


def compute_charges(
    old_electric: int,
    new_electric: int,
    old_water: int,
    new_water: int,
    electricity_price: Optional[Decimal],
    water_price: Optional[Decimal],
) -> UtilityCharges:
    electric_usage = usage(old_electric, new_electric)
    water_usage = usage(old_water, new_water)
    return UtilityCharges(
        electric_usage=electric_usage,
        water_usage=water_usage,
        electricity_cost=(electricity_price or ZERO) * electric_usage,
        water_cost=(water_price or ZERO) * water_usage,
    )


class MeterReadingService(BaseService):
    """Records meter readings and keeps the period invoice in step."""

    def __init__(self, db: Session, billing_service: Optional[BillingService] = None):
        super().__init__(db)
        self.rooms = RoomRepository(db)
        self.readings = MeterReadingRepository(db)
        self.prices = ServicePriceRepository(db)
        self.billing = billing_service or BillingService(db)

    def unit_prices(self, month: int, year: int) -> Tuple[Decimal, Decimal]:
        """
        Electricity and water unit prices applying to a billing period.

        The applicable row is the one with the latest effective_from on or
        before the first day of the month; missing prices are zero.
        """
        price = self.prices.applicable_for(date(year, month, 1))
        if price is None:
            return ZERO, ZERO
        return price.electricity_price or ZERO, price.water_price or ZERO

    def record_reading(self, data: MeterReadingCreate) -> MeterReading:
        """
        Store a reading with its computed costs and upsert the period invoice.

        Raises:
            InvalidReferenceError: If the room does not exist
        """
        room = self.rooms.find_by_id(data.room_id)
        if room is None:
            raise InvalidReferenceError("Room", data.room_id)

        electricity_price, water_price = self.unit_prices(data.month, data.year)
        charges = compute_charges(
            data.old_electric,
            data.new_electric,
            data.old_water,
            data.new_water,
            electricity_price,
            water_price,
        )

        reading = self.readings.create(
            MeterReading(
                room_id=room.id,
                month=data.month,
                year=data.year,
                old_electric=data.old_electric,
                new_electric=data.new_electric,
                old_water=data.old_water,
                new_water=data.new_water,
                electricity_cost=charges.electricity_cost,
                water_cost=charges.water_cost,
                total_cost=charges.total_cost,
            )
        )

        self.billing.upsert_invoice_from_reading(reading, room=room)
        self.commit()
        self.db.refresh(reading)

        self._logger.info(
            "Meter reading recorded",
            extra={
                "reading_id": reading.id,
                "room_id": room.id,
                "period": f"{data.month}/{data.year}",
                "electric_usage": charges.electric_usage,
                "water_usage": charges.water_usage,
            },
        )
        return reading

    def list_readings(self, room_id: Optional[int] = None) -> List[MeterReading]:
        return self.readings.list_with_room(room_id)
