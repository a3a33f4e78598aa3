"""
In-app notifications.

Notifications are stored and logged; live delivery to connected clients
is outside this service.
"""

from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from motel.core.exceptions import InvalidReferenceError, ResourceNotFoundError, ValidationError
from motel.models.notification import Notification
from motel.repositories.invoice_repository import InvoiceRepository
from motel.repositories.notification_repository import NotificationRepository
from motel.repositories.user_repository import UserRepository
from motel.schemas.common.enums import InvoiceStatus
from motel.services.base.base_service import BaseService


class NotificationService(BaseService):

    def __init__(self, db: Session):
        super().__init__(db)
        self.notifications = NotificationRepository(db)
        self.users = UserRepository(db)
        self.invoices = InvoiceRepository(db)

    def list_for_user(self, user_id: int, unread_only: bool = False) -> List[Notification]:
        return self.notifications.list_for_user(user_id, unread_only=unread_only)

    def mark_read(self, notification_id: int, user_id: int) -> Notification:
        """Mark one of the user's notifications as read; others' are reported as missing."""
        notification = self.notifications.find_by_id(notification_id)
        if notification is None or notification.user_id != user_id:
            raise ResourceNotFoundError("Notification", notification_id)

        notification.read_flag = True
        self.commit()
        return notification

    def create_and_push(self, message: str, user_id: Optional[int] = None) -> List[Notification]:
        """
        Notify one user, or every active user when ``user_id`` is None.

        Raises:
            ValidationError: Blank message
            InvalidReferenceError: Unknown recipient
        """
        text = (message or "").strip()
        if not text:
            raise ValidationError("Notification message cannot be empty", field_errors={"message": ["required"]})

        if user_id is not None:
            user = self.users.find_by_id(user_id)
            if user is None:
                raise InvalidReferenceError("User", user_id)
            targets = [user]
        else:
            targets = self.users.find_active()

        created = [
            self.notifications.create(Notification(user_id=user.id, message=text))
            for user in targets
        ]
        self.commit()

        self._logger.info(
            "Notifications pushed",
            extra={"recipients": len(created), "broadcast": user_id is None},
        )
        return created

    def remind_payment_due(self, today: Optional[date] = None) -> int:
        """
        Notify the user behind every UNPAID invoice's tenant.

        Invoices without a tenant, or whose tenant has no login, are skipped.

        Returns:
            Number of notifications created
        """
        today = today or date.today()
        count = 0

        for invoice in self.invoices.list_with_details(status=InvoiceStatus.UNPAID):
            tenant = invoice.tenant
            if tenant is None or tenant.user_id is None:
                continue
            self.notifications.create(
                Notification(
                    user_id=tenant.user_id,
                    message=(
                        f"Payment reminder for invoice {invoice.period_label()} "
                        f"for room {invoice.room.code} on {today.isoformat()}"
                    ),
                )
            )
            count += 1

        self.commit()
        self._logger.info("Payment-due notifications created", extra={"count": count})
        return count
