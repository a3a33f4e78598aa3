"""
FastAPI Dependencies

This module contains dependency functions used throughout the application
for database sessions, actor resolution and authorization.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from motel.core.exceptions import AuthenticationError, AuthorizationError
from motel.core.logging import get_logger
from motel.core.permissions import Operation, allowed_roles, is_allowed
from motel.core.security import decode_access_token
from motel.db.session import get_db
from motel.repositories.tenant_repository import TenantRepository
from motel.repositories.user_repository import UserRepository
from motel.schemas.common.enums import UserRole

logger = get_logger(__name__)

# Security scheme; missing credentials are reported as 401 by get_actor
security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class ActorContext:
    """
    The authenticated caller, resolved once per request.

    tenant_id is the tenant record linked to the user, if any.
    """

    user_id: int
    username: str
    role: UserRole
    full_name: Optional[str] = None
    tenant_id: Optional[int] = None

    @property
    def is_tenant(self) -> bool:
        return self.role == UserRole.TENANT


def get_actor(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db),
) -> ActorContext:
    """
    Resolve the bearer token into an ActorContext.

    Raises:
        AuthenticationError: Missing/invalid token, unknown or inactive user
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Authentication required")

    payload = decode_access_token(credentials.credentials)

    user = UserRepository(db).find_by_username(payload["sub"])
    if user is None:
        raise AuthenticationError("User no longer exists")
    if not user.active:
        raise AuthenticationError("Account is not active")

    tenant = TenantRepository(db).find_by_user_id(user.id)

    return ActorContext(
        user_id=user.id,
        username=user.username,
        role=user.role,
        full_name=user.full_name,
        tenant_id=tenant.id if tenant else None,
    )


def require(operation: Operation) -> Callable[..., ActorContext]:
    """
    Build a dependency that admits only roles granted ``operation``.

    Usage:
        @router.post("/payments")
        def record_payment(actor: ActorContext = Depends(require(Operation.PAYMENT_RECORD))):
            ...
    """
    roles = allowed_roles(operation)

    def dependency(actor: ActorContext = Depends(get_actor)) -> ActorContext:
        if not is_allowed(actor.role, operation):
            logger.warning(
                "Operation denied",
                extra={"operation": operation.value, "role": actor.role.value, "actor_id": actor.user_id},
            )
            raise AuthorizationError(
                "You do not have permission to perform this action",
                required_roles=sorted(role.value for role in roles),
            )
        return actor

    dependency.__name__ = f"require_{operation.name.lower()}"
    return dependency


__all__ = [
    "ActorContext",
    "get_actor",
    "get_db",
    "require",
    "security",
]
