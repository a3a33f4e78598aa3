"""
Meter reading endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from motel.api.deps import audit_trail
from motel.core.dependencies import ActorContext, get_db, require
from motel.core.permissions import Operation
from motel.schemas.meter_reading import MeterReadingCreate, MeterReadingResponse
from motel.services.meter_reading_service import MeterReadingService

router = APIRouter(prefix="/meter-readings", tags=["meter-readings"], dependencies=[Depends(audit_trail)])


@router.get("", response_model=List[MeterReadingResponse])
def list_meter_readings(
    room_id: Optional[int] = Query(None),
    actor: ActorContext = Depends(require(Operation.METER_READING_READ)),
    db: Session = Depends(get_db),
):
    return MeterReadingService(db).list_readings(room_id)


@router.post("", response_model=MeterReadingResponse, status_code=status.HTTP_201_CREATED)
def record_meter_reading(
    payload: MeterReadingCreate,
    actor: ActorContext = Depends(require(Operation.METER_READING_RECORD)),
    db: Session = Depends(get_db),
):
    """Store the reading and create or refresh the room's invoice for the period."""
    return MeterReadingService(db).record_reading(payload)
