"""
User accounts and login.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from motel.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleError,
    ConflictError,
    InvalidReferenceError,
    ValidationError,
)
from motel.core.security import create_access_token, hash_password, verify_password
from motel.models.user import User
from motel.repositories.tenant_repository import TenantRepository
from motel.repositories.user_repository import UserRepository
from motel.schemas.auth import TokenResponse
from motel.schemas.common.enums import UserRole
from motel.schemas.user import RegisterRequest, UserCreate, UserUpdate
from motel.services.base.base_service import BaseService

MIN_PASSWORD_LENGTH = 6


class UserService(BaseService):

    def __init__(self, db: Session):
        super().__init__(db)
        self.users = UserRepository(db)
        self.tenants = TenantRepository(db)

    def list_users(self) -> List[User]:
        return self.users.find_all()

    def get_user(self, user_id: int) -> User:
        return self.users.get_by_id(user_id)

    def _new_user(
        self,
        username: str,
        password: str,
        full_name: Optional[str],
        phone: Optional[str],
        role: UserRole,
        active: bool = True,
    ) -> User:
        if self.users.find_by_username(username) is not None:
            raise ConflictError("Username is already taken", details={"username": username})

        return self.users.create(
            User(
                username=username,
                password_hash=hash_password(password),
                full_name=full_name,
                phone=phone,
                role=role,
                active=active,
            )
        )

    def _link(self, user: User, tenant_id: Optional[int]) -> None:
        """Move the account's tenant link to ``tenant_id``; None only unlinks. The caller commits."""
        if tenant_id is not None and user.role != UserRole.TENANT:
            raise BusinessRuleError(
                "Only TENANT accounts can be linked to a tenant",
                details={"user_id": user.id, "role": user.role.value},
            )

        target = None
        if tenant_id is not None:
            target = self.tenants.find_by_id(tenant_id)
            if target is None:
                raise InvalidReferenceError("Tenant", tenant_id)
            if target.user_id is not None and target.user_id != user.id:
                raise ConflictError(
                    "Tenant is already linked to another account",
                    details={"tenant_id": tenant_id, "user_id": target.user_id},
                )

        current = self.tenants.find_by_user_id(user.id)
        if current is not None and current is not target:
            current.user_id = None
            self.db.flush()
        if target is not None:
            target.user_id = user.id
            self.db.flush()

    def create_user(self, data: UserCreate) -> User:
        user = self._new_user(data.username, data.password, data.full_name, data.phone, data.role, data.active)
        if data.tenant_id is not None:
            self._link(user, data.tenant_id)
        self.commit()
        self._logger.info("User created", extra={"user_id": user.id, "role": user.role.value})
        return user

    def register(self, data: RegisterRequest) -> User:
        """
        Self-service sign-up.

        Raises:
            AuthorizationError: A role other than TENANT was requested
            ConflictError: The username is taken
        """
        if data.role != UserRole.TENANT:
            raise AuthorizationError("Only tenant accounts can be self-registered")

        user = self._new_user(data.username, data.password, data.full_name, data.phone, UserRole.TENANT)
        self.commit()
        self._logger.info("User registered", extra={"user_id": user.id})
        return user

    def update_user(self, user_id: int, data: UserUpdate) -> User:
        user = self.users.get_by_id(user_id)
        changes = data.model_dump(exclude_unset=True, exclude={"password"})
        if changes.get("role") is None:
            changes.pop("role", None)
        if changes.get("active") is None:
            changes.pop("active", None)

        if data.password:
            if len(data.password) < MIN_PASSWORD_LENGTH:
                raise ValidationError(
                    "Password is too short",
                    field_errors={"password": [f"at least {MIN_PASSWORD_LENGTH} characters"]},
                )
            changes["password_hash"] = hash_password(data.password)

        self.users.update(user, changes)
        self.commit()
        return user

    def set_active(self, user_id: int, active: bool) -> User:
        """Lock (``active=False``) or unlock an account."""
        user = self.users.get_by_id(user_id)
        user.active = active
        self.commit()
        self._logger.info("User lock state changed", extra={"user_id": user_id, "active": active})
        return user

    def link_tenant(self, user_id: int, tenant_id: Optional[int]) -> User:
        user = self.users.get_by_id(user_id)
        self._link(user, tenant_id)
        self.commit()
        self._logger.info("User tenant link changed", extra={"user_id": user_id, "tenant_id": tenant_id})
        return user

    def authenticate(self, username: str, password: str) -> TokenResponse:
        """
        Exchange credentials for a bearer token.

        Raises:
            AuthenticationError: Unknown user, wrong password or inactive account
        """
        user = self.users.find_by_username(username)
        if user is None or not verify_password(password, user.password_hash):
            self._logger.warning("Login failed", extra={"username": username})
            raise AuthenticationError("Invalid username or password")
        if not user.active:
            raise AuthenticationError("Account is not active")

        token = create_access_token(subject=user.username, role=user.role.value)
        self._logger.info("Login succeeded", extra={"user_id": user.id})
        return TokenResponse(
            access_token=token,
            username=user.username,
            role=user.role,
            full_name=user.full_name,
        )
