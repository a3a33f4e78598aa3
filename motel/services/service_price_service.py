"""
Service price management.
"""

from typing import List

from sqlalchemy.orm import Session

from motel.models.service_price import ServicePrice
from motel.repositories.service_price_repository import ServicePriceRepository
from motel.schemas.service_price import ServicePriceCreate, ServicePriceUpdate
from motel.services.base.base_service import BaseService


class ServicePriceService(BaseService):

    def __init__(self, db: Session):
        super().__init__(db)
        self.prices = ServicePriceRepository(db)

    def list_prices(self) -> List[ServicePrice]:
        return self.prices.find_all(order_by=ServicePrice.effective_from.desc())

    def create_price(self, data: ServicePriceCreate) -> ServicePrice:
        price = self.prices.create(ServicePrice(**data.model_dump()))
        self.commit()
        self._logger.info(
            "Service price created",
            extra={"service_price_id": price.id, "effective_from": price.effective_from.isoformat()},
        )
        return price

    def update_price(self, price_id: int, data: ServicePriceUpdate) -> ServicePrice:
        price = self.prices.get_by_id(price_id)
        self.prices.update(price, data.model_dump(exclude_unset=True))
        self.commit()
        return price

    def delete_price(self, price_id: int) -> None:
        price = self.prices.get_by_id(price_id)
        self.prices.delete(price)
        self.commit()
