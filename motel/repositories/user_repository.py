"""
User Repository.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from motel.models.user import User
from motel.repositories.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for API accounts."""

    def __init__(self, db: Session):
        super().__init__(User, db)

    def find_by_username(self, username: str) -> Optional[User]:
        return self.db.scalars(select(User).where(User.username == username)).first()

    def find_active(self) -> List[User]:
        stmt = select(User).where(User.active.is_(True)).order_by(User.id)
        return list(self.db.scalars(stmt).all())
