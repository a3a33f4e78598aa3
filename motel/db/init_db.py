"""Database initialization utilities."""
from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from motel.core.logging import get_logger
from motel.db.base import Base, import_models
from motel.db.session import engine as default_engine

logger = get_logger(__name__)


def init_db(engine: Engine = default_engine) -> None:
    """
    Create all tables that do not exist yet.

    Note: This is suitable for development/testing only.
    For production, manage the schema with migrations.
    """
    import_models()
    existing_tables = inspect(engine).get_table_names()
    Base.metadata.create_all(bind=engine)
    logger.info(
        "Database schema ensured",
        extra={"existing_tables": len(existing_tables), "total_tables": len(Base.metadata.tables)},
    )


def drop_db(engine: Engine = default_engine) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data! Only for development/testing purposes.
    """
    import_models()
    Base.metadata.drop_all(bind=engine)
    logger.warning("All database tables dropped")
