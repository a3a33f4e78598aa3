"""SQLAlchemy Base class for all models."""
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


# Import all models here to ensure they're registered with Base
def import_models():
    """Import all models to register them with SQLAlchemy."""
    import motel.models  # noqa: F401
