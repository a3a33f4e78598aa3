"""
User account endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from motel.api.deps import audit_trail
from motel.core.dependencies import ActorContext, get_db, require
from motel.core.permissions import Operation
from motel.schemas.user import UserCreate, UserResponse, UserTenantLink, UserUpdate
from motel.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"], dependencies=[Depends(audit_trail)])


@router.get("", response_model=List[UserResponse])
def list_users(
    actor: ActorContext = Depends(require(Operation.USER_LIST)),
    db: Session = Depends(get_db),
):
    return UserService(db).list_users()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    actor: ActorContext = Depends(require(Operation.USER_CREATE)),
    db: Session = Depends(get_db),
):
    return UserService(db).create_user(payload)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    payload: UserUpdate,
    actor: ActorContext = Depends(require(Operation.USER_WRITE)),
    db: Session = Depends(get_db),
):
    return UserService(db).update_user(user_id, payload)


@router.put("/{user_id}/lock", response_model=UserResponse)
def lock_user(
    user_id: int,
    actor: ActorContext = Depends(require(Operation.USER_WRITE)),
    db: Session = Depends(get_db),
):
    return UserService(db).set_active(user_id, False)


@router.put("/{user_id}/unlock", response_model=UserResponse)
def unlock_user(
    user_id: int,
    actor: ActorContext = Depends(require(Operation.USER_WRITE)),
    db: Session = Depends(get_db),
):
    return UserService(db).set_active(user_id, True)


@router.put("/{user_id}/tenant", response_model=UserResponse)
def link_user_tenant(
    user_id: int,
    payload: UserTenantLink,
    actor: ActorContext = Depends(require(Operation.USER_WRITE)),
    db: Session = Depends(get_db),
):
    """Link the account to a tenant, or unlink it when ``tenant_id`` is null."""
    return UserService(db).link_tenant(user_id, payload.tenant_id)
