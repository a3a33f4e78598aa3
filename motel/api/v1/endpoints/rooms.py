"""
Room endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from motel.api.deps import audit_trail
from motel.core.dependencies import ActorContext, get_db, require
from motel.core.permissions import Operation
from motel.schemas.room import RoomCreate, RoomResponse, RoomUpdate
from motel.services.room_service import RoomService

router = APIRouter(prefix="/rooms", tags=["rooms"], dependencies=[Depends(audit_trail)])


@router.get("", response_model=List[RoomResponse])
def list_rooms(
    actor: ActorContext = Depends(require(Operation.ROOM_READ)),
    db: Session = Depends(get_db),
):
    return RoomService(db).list_rooms()


@router.get("/available", response_model=List[RoomResponse])
def list_available_rooms(
    actor: ActorContext = Depends(require(Operation.ROOM_READ)),
    db: Session = Depends(get_db),
):
    return RoomService(db).list_available()


@router.get("/{room_id}", response_model=RoomResponse)
def get_room(
    room_id: int,
    actor: ActorContext = Depends(require(Operation.ROOM_READ)),
    db: Session = Depends(get_db),
):
    return RoomService(db).get_room(room_id)


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
def create_room(
    payload: RoomCreate,
    actor: ActorContext = Depends(require(Operation.ROOM_WRITE)),
    db: Session = Depends(get_db),
):
    return RoomService(db).create_room(payload)


@router.put("/{room_id}", response_model=RoomResponse)
def update_room(
    room_id: int,
    payload: RoomUpdate,
    actor: ActorContext = Depends(require(Operation.ROOM_WRITE)),
    db: Session = Depends(get_db),
):
    return RoomService(db).update_room(room_id, payload)


@router.delete("/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_room(
    room_id: int,
    actor: ActorContext = Depends(require(Operation.ROOM_WRITE)),
    db: Session = Depends(get_db),
):
    RoomService(db).delete_room(room_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
