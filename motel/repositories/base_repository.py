"""
Base repository with the CRUD operations shared by every model.

Writes flush by default and leave the commit to the service owning the
unit of work. Integrity failures surface as application exceptions.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from motel.core.exceptions import (
    ConflictError,
    DuplicateEntryError,
    RepositoryError,
    ResourceNotFoundError,
)
from motel.core.logging import get_logger
from motel.models.base import BaseModel

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """Generic repository over one model class."""

    def __init__(self, model: Type[ModelType], db: Session):
        self.model = model
        self.db = db

    def _write(self, commit: bool, refresh: Optional[ModelType] = None) -> None:
        if commit:
            self.db.commit()
            if refresh is not None:
                self.db.refresh(refresh)
        else:
            self.db.flush()

    # ==================== Create ====================

    def create(self, entity: ModelType, commit: bool = False) -> ModelType:
        """
        Add a new entity and assign its primary key.

        Raises:
            DuplicateEntryError: If a uniqueness constraint is violated
        """
        try:
            self.db.add(entity)
            self._write(commit, refresh=entity)
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEntryError(f"{self.model.__name__} already exists") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Create failed: {e}") from e

        logger.debug(f"Created {self.model.__name__} {entity.id}")
        return entity

    # ==================== Read ====================

    def find_by_id(self, id: int) -> Optional[ModelType]:
        try:
            return self.db.get(self.model, id)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Find by ID failed: {e}") from e

    def get_by_id(self, id: int) -> ModelType:
        """
        Raises:
            ResourceNotFoundError: If no row has this id
        """
        entity = self.find_by_id(id)
        if entity is None:
            raise ResourceNotFoundError(self.model.__name__, id)
        return entity

    def find_all(
        self,
        skip: int = 0,
        limit: Optional[int] = None,
        order_by: Optional[Any] = None,
    ) -> List[ModelType]:
        """All rows, ordered by id unless another ordering is given."""
        stmt = select(self.model).order_by(order_by if order_by is not None else self.model.id)
        if skip:
            stmt = stmt.offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.scalars(stmt).all())

    def count(self, criteria: Optional[Dict[str, Any]] = None) -> int:
        """Count rows, optionally filtered by column equality."""
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.filter_by(**criteria)
        return self.db.scalar(stmt) or 0

    # ==================== Update ====================

    def update(self, entity: ModelType, data: Dict[str, Any], commit: bool = False) -> ModelType:
        """
        Apply attribute values to a persistent entity.

        Unknown attribute names are ignored.
        """
        for key, value in data.items():
            if hasattr(entity, key):
                setattr(entity, key, value)
        try:
            self._write(commit, refresh=entity)
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEntryError(f"{self.model.__name__} violates a uniqueness constraint") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Update failed: {e}") from e
        return entity

    # ==================== Delete ====================

    def delete(self, entity: ModelType, commit: bool = False) -> None:
        """
        Raises:
            ConflictError: If the row is still referenced
        """
        entity_id = entity.id
        try:
            self.db.delete(entity)
            self._write(commit)
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(f"{self.model.__name__} is still referenced and cannot be deleted") from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(f"Delete failed: {e}") from e

        logger.info(f"Deleted {self.model.__name__} {entity_id}")
