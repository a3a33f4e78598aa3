"""
Service Price Repository.
"""

from datetime import date
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from motel.models.service_price import ServicePrice
from motel.repositories.base_repository import BaseRepository


class ServicePriceRepository(BaseRepository[ServicePrice]):
    """Repository for time-versioned unit prices."""

    def __init__(self, db: Session):
        super().__init__(ServicePrice, db)

    def applicable_for(self, on_date: date) -> Optional[ServicePrice]:
        """Price row with the latest effective_from on or before the date."""
        stmt = (
            select(ServicePrice)
            .where(ServicePrice.effective_from <= on_date)
            .order_by(ServicePrice.effective_from.desc(), ServicePrice.id.desc())
        )
        return self.db.scalars(stmt).first()
