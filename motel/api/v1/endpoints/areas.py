"""
Area endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from motel.api.deps import audit_trail
from motel.core.dependencies import ActorContext, get_db, require
from motel.core.permissions import Operation
from motel.schemas.area import AreaCreate, AreaResponse, AreaUpdate
from motel.services.area_service import AreaService

router = APIRouter(prefix="/areas", tags=["areas"], dependencies=[Depends(audit_trail)])


@router.get("", response_model=List[AreaResponse])
def list_areas(
    actor: ActorContext = Depends(require(Operation.AREA_READ)),
    db: Session = Depends(get_db),
):
    return AreaService(db).list_areas()


@router.post("", response_model=AreaResponse, status_code=status.HTTP_201_CREATED)
def create_area(
    payload: AreaCreate,
    actor: ActorContext = Depends(require(Operation.AREA_WRITE)),
    db: Session = Depends(get_db),
):
    return AreaService(db).create_area(payload)


@router.put("/{area_id}", response_model=AreaResponse)
def update_area(
    area_id: int,
    payload: AreaUpdate,
    actor: ActorContext = Depends(require(Operation.AREA_WRITE)),
    db: Session = Depends(get_db),
):
    return AreaService(db).update_area(area_id, payload)


@router.delete("/{area_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_area(
    area_id: int,
    actor: ActorContext = Depends(require(Operation.AREA_WRITE)),
    db: Session = Depends(get_db),
):
    AreaService(db).delete_area(area_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
