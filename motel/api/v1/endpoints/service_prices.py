"""
Service price endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from motel.api.deps import audit_trail
from motel.core.dependencies import ActorContext, get_db, require
from motel.core.permissions import Operation
from motel.schemas.service_price import (
    ServicePriceCreate,
    ServicePriceResponse,
    ServicePriceUpdate,
)
from motel.services.service_price_service import ServicePriceService

router = APIRouter(prefix="/service-prices", tags=["service-prices"], dependencies=[Depends(audit_trail)])


@router.get("", response_model=List[ServicePriceResponse])
def list_service_prices(
    actor: ActorContext = Depends(require(Operation.SERVICE_PRICE_READ)),
    db: Session = Depends(get_db),
):
    return ServicePriceService(db).list_prices()


@router.post("", response_model=ServicePriceResponse, status_code=status.HTTP_201_CREATED)
def create_service_price(
    payload: ServicePriceCreate,
    actor: ActorContext = Depends(require(Operation.SERVICE_PRICE_WRITE)),
    db: Session = Depends(get_db),
):
    return ServicePriceService(db).create_price(payload)


@router.put("/{price_id}", response_model=ServicePriceResponse)
def update_service_price(
    price_id: int,
    payload: ServicePriceUpdate,
    actor: ActorContext = Depends(require(Operation.SERVICE_PRICE_WRITE)),
    db: Session = Depends(get_db),
):
    return ServicePriceService(db).update_price(price_id, payload)


@router.delete("/{price_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_service_price(
    price_id: int,
    actor: ActorContext = Depends(require(Operation.SERVICE_PRICE_WRITE)),
    db: Session = Depends(get_db),
):
    ServicePriceService(db).delete_price(price_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
