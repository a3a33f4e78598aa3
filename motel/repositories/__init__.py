"""
Repositories package.

One repository per aggregate, all built on ``BaseRepository``.
"""

from motel.repositories.area_repository import AreaRepository
from motel.repositories.base_repository import BaseRepository
from motel.repositories.contract_repository import ContractRepository
from motel.repositories.invoice_repository import InvoiceRepository
from motel.repositories.meter_reading_repository import MeterReadingRepository
from motel.repositories.notification_repository import NotificationRepository
from motel.repositories.payment_repository import PaymentRepository
from motel.repositories.room_repository import RoomRepository
from motel.repositories.service_price_repository import ServicePriceRepository
from motel.repositories.support_request_repository import SupportRequestRepository
from motel.repositories.system_log_repository import SystemLogRepository
from motel.repositories.tenant_repository import TenantRepository
from motel.repositories.user_repository import UserRepository

__all__ = [
    "AreaRepository",
    "BaseRepository",
    "ContractRepository",
    "InvoiceRepository",
    "MeterReadingRepository",
    "NotificationRepository",
    "PaymentRepository",
    "RoomRepository",
    "ServicePriceRepository",
    "SupportRequestRepository",
    "SystemLogRepository",
    "TenantRepository",
    "UserRepository",
]
