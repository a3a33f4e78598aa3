"""
ORM models.

Importing this package registers every table on ``Base.metadata``.
"""

from motel.models.area import Area
from motel.models.base import BaseModel
from motel.models.contract import Contract
from motel.models.invoice import Invoice
from motel.models.meter_reading import MeterReading
from motel.models.notification import Notification
from motel.models.payment import Payment
from motel.models.room import Room
from motel.models.service_price import ServicePrice
from motel.models.support_request import SupportRequest
from motel.models.system_log import SystemLog
from motel.models.tenant import Tenant
from motel.models.user import User

__all__ = [
    "Area",
    "BaseModel",
    "Contract",
    "Invoice",
    "MeterReading",
    "Notification",
    "Payment",
    "Room",
    "ServicePrice",
    "SupportRequest",
    "SystemLog",
    "Tenant",
    "User",
]
