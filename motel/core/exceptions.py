"""
Custom Exceptions for the Motel Management Application

This module defines the exception classes raised by services and
repositories, and the FastAPI handlers that render them.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    INVALID_REFERENCE = "INVALID_REFERENCE"

    # Authentication & Authorization
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"
    TOKEN_INVALID = "TOKEN_INVALID"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Database errors
    DATABASE_ERROR = "DATABASE_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"

    # Business logic errors
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    CONFLICT = "CONFLICT"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to the JSON body returned to clients"""
        return {
            "message": self.message,
            "code": self.error_code.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# Client errors
# ========================================

class ValidationError(BaseAppException):
    """Exception raised when data validation fails"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
        status_code: int = 422
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details, status_code)


class ResourceNotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[Any] = None,
        message: Optional[str] = None
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id is not None:
                message += f" (ID: {resource_id})"

        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details, 404)


class InvalidReferenceError(BaseAppException):
    """A request body references an entity that does not exist"""

    def __init__(self, resource_type: str, resource_id: Optional[Any] = None):
        message = f"Referenced {resource_type.lower()} does not exist"
        if resource_id is not None:
            message += f" (ID: {resource_id})"
        details = {"resource_type": resource_type, "resource_id": resource_id}
        super().__init__(message, ErrorCode.INVALID_REFERENCE, details, 400)


class BusinessRuleError(BaseAppException):
    """A request is well formed but rejected by a business rule"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.BUSINESS_RULE_VIOLATION, details, 400)


class ConflictError(BaseAppException):
    """The request conflicts with the current state of a resource"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.CONFLICT, details, 409)


class AuthenticationError(BaseAppException):
    """Exception raised when authentication fails"""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, ErrorCode.AUTHENTICATION_FAILED, {}, 401)


class AuthorizationError(BaseAppException):
    """Exception raised when the actor lacks the required role"""

    def __init__(self, message: str = "Access denied", required_roles: Optional[List[str]] = None):
        details = {"required_roles": required_roles} if required_roles else {}
        super().__init__(message, ErrorCode.AUTHORIZATION_FAILED, details, 403)


class InvalidTokenError(AuthenticationError):
    """Exception raised for malformed or expired tokens"""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)
        self.error_code = ErrorCode.TOKEN_INVALID


# ========================================
# Persistence errors
# ========================================

class RepositoryError(BaseAppException):
    """Exception raised when a database operation fails"""

    def __init__(self, message: str = "Database operation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.DATABASE_ERROR, details, 500)


class DuplicateEntryError(RepositoryError):
    """Exception raised on a uniqueness constraint violation"""

    def __init__(self, message: str = "Duplicate entry", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.error_code = ErrorCode.DUPLICATE_ENTRY
        self.status_code = 409


def register_exception_handlers(app: FastAPI) -> None:
    """Render application exceptions as JSON bodies with their status code"""
    from motel.core.logging import get_logger

    logger = get_logger(__name__)

    @app.exception_handler(BaseAppException)
    async def handle_app_exception(request: Request, exc: BaseAppException) -> JSONResponse:
        log = logger.error if exc.status_code >= 500 else logger.warning
        log(
            f"Application exception: {exc.error_code.value} - {exc.message}",
            extra={
                "path": request.url.path,
                "method": request.method,
                "status_code": exc.status_code,
            }
        )
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


__all__ = [
    "ErrorCode",
    "BaseAppException",
    "ValidationError",
    "ResourceNotFoundError",
    "InvalidReferenceError",
    "BusinessRuleError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "InvalidTokenError",
    "RepositoryError",
    "DuplicateEntryError",
    "register_exception_handlers",
]
