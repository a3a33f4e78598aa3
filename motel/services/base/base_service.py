"""
Base service class providing common functionality for all services.
"""

from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from motel.core.logging import get_logger
from motel.services.base.service_result import (
    ErrorCode,
    ErrorSeverity,
    ServiceError,
    ServiceResult,
)


class BaseService:
    """
    Base service with common behaviors:
    - Shared logger and db session
    - Commit of the unit of work
    - Conversion of caught transport errors to ServiceResult failures
    """

    def __init__(self, db: Session):
        self.db: Session = db
        self._logger = get_logger(f"motel.services.{self.__class__.__name__}")

    def commit(self) -> None:
        """Commit the unit of work; roll back and re-raise on failure."""
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def _handle_exception(
        self,
        exception: Exception,
        operation: str,
        entity_ref: Optional[Any] = None,
        code: ErrorCode = ErrorCode.EXTERNAL_SERVICE_ERROR,
        additional_context: Optional[Dict[str, Any]] = None,
    ) -> ServiceResult:
        """
        Convert an exception to a ServiceResult failure carrying its text.

        Args:
            exception: The caught exception
            operation: Description of the operation that failed
            entity_ref: Reference to the entity involved
            code: Error code reported to the caller
            additional_context: Extra context for logging
        """
        context = {
            "operation": operation,
            "entity_ref": str(entity_ref) if entity_ref is not None else None,
            "exception_type": type(exception).__name__,
        }
        if additional_context:
            context.update(additional_context)

        self._logger.error(f"Error during {operation}: {exception}", extra=context)

        return ServiceResult.failure(
            ServiceError(
                code=code,
                message=str(exception),
                severity=ErrorSeverity.ERROR,
                details=context,
            )
        )
