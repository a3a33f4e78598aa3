"""
Authentication endpoints.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from motel.core.dependencies import ActorContext, get_db, require
from motel.core.permissions import Operation
from motel.schemas.auth import LoginRequest, TokenResponse
from motel.schemas.user import RegisterRequest, UserResponse
from motel.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    return UserService(db).authenticate(payload.username, payload.password)


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    """Open sign-up for tenant accounts; staff and admins are created under /users."""
    return UserService(db).register(payload)


@router.get("/me", response_model=UserResponse)
def me(
    actor: ActorContext = Depends(require(Operation.AUTH_ME)),
    db: Session = Depends(get_db),
):
    return UserService(db).get_user(actor.user_id)
