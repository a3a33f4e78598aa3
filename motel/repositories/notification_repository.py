"""
Notification Repository.
"""

from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from motel.models.notification import Notification
from motel.repositories.base_repository import BaseRepository


class NotificationRepository(BaseRepository[Notification]):
    """Repository for in-app notifications."""

    def __init__(self, db: Session):
        super().__init__(Notification, db)

    def list_for_user(self, user_id: int, unread_only: bool = False) -> List[Notification]:
        stmt = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            stmt = stmt.where(Notification.read_flag.is_(False))
        stmt = stmt.order_by(Notification.sent_at.desc(), Notification.id.desc())
        return list(self.db.scalars(stmt).all())
