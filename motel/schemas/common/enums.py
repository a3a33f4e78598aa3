"""
All enumeration types used across the application.

These enums represent the core domain concepts for the motel
(users, rooms, contracts, invoices, payments, support requests).
"""

from enum import Enum
from typing import Any

__all__ = [
    "UserRole",
    "RoomStatus",
    "ContractStatus",
    "InvoiceStatus",
    "PaymentMethod",
    "ReminderChannel",
    "SupportRequestStatus",
]


class UserRole(str, Enum):
    """Role of an API user."""

    ADMIN = "ADMIN"
    STAFF = "STAFF"
    TENANT = "TENANT"


class RoomStatus(str, Enum):
    """Room occupancy status."""

    AVAILABLE = "AVAILABLE"
    OCCUPIED = "OCCUPIED"
    MAINTENANCE = "MAINTENANCE"


class ContractStatus(str, Enum):
    """Lease contract status."""

    ACTIVE = "ACTIVE"
    ENDED = "ENDED"


class InvoiceStatus(str, Enum):
    """Invoice settlement status."""

    UNPAID = "UNPAID"
    PARTIAL = "PARTIAL"
    PAID = "PAID"

    @property
    def rank(self) -> int:
        """Settlement progress; reconciliation only ever moves to a higher rank."""
        return _INVOICE_STATUS_RANK[self]


_INVOICE_STATUS_RANK = {
    InvoiceStatus.UNPAID: 0,
    InvoiceStatus.PARTIAL: 1,
    InvoiceStatus.PAID: 2,
}


class PaymentMethod(str, Enum):
    """Payment method enumeration."""

    CASH = "CASH"
    BANK_TRANSFER = "BANK_TRANSFER"
    CARD = "CARD"
    E_WALLET = "E_WALLET"


class ReminderChannel(str, Enum):
    """Delivery channel for debt reminders."""

    EMAIL = "email"
    SMS = "sms"

    @classmethod
    def parse(cls, value: Any) -> "ReminderChannel | None":
        """Case-insensitive lookup; None for anything that is not a channel."""
        if not isinstance(value, str) or not value.strip():
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class SupportRequestStatus(str, Enum):
    """Tenant support ticket status."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
