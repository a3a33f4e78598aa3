"""
Capability table.

Maps every protected operation to the roles allowed to perform it. The
table is checked by ``motel.core.dependencies.require`` before a handler
runs; handlers never inspect roles for coarse access decisions.
"""

from enum import Enum
from typing import Dict, FrozenSet

from motel.schemas.common.enums import UserRole

ADMIN = UserRole.ADMIN
STAFF = UserRole.STAFF
TENANT = UserRole.TENANT

ALL_ROLES = frozenset({ADMIN, STAFF, TENANT})
MANAGERS = frozenset({ADMIN, STAFF})
ADMIN_ONLY = frozenset({ADMIN})
TENANT_ONLY = frozenset({TENANT})


class Operation(str, Enum):
    """Protected API operations."""

    AUTH_ME = "auth:me"

    USER_LIST = "users:list"
    USER_CREATE = "users:create"
    USER_WRITE = "users:write"

    AREA_READ = "areas:read"
    AREA_WRITE = "areas:write"

    ROOM_READ = "rooms:read"
    ROOM_WRITE = "rooms:write"

    TENANT_READ = "tenants:read"
    TENANT_CREATE = "tenants:create"
    TENANT_WRITE = "tenants:write"
    TENANT_SELF = "tenants:self"

    CONTRACT_READ = "contracts:read"
    CONTRACT_CREATE = "contracts:create"
    CONTRACT_EXTEND = "contracts:extend"
    CONTRACT_END = "contracts:end"
    CONTRACT_SELF = "contracts:self"

    SERVICE_PRICE_READ = "service-prices:read"
    SERVICE_PRICE_WRITE = "service-prices:write"

    METER_READING_READ = "meter-readings:read"
    METER_READING_RECORD = "meter-readings:record"

    INVOICE_LIST = "invoices:list"
    INVOICE_SELF = "invoices:self"
    INVOICE_GENERATE = "invoices:generate"
    INVOICE_SET_STATUS = "invoices:set-status"
    INVOICE_REMIND = "invoices:remind"

    PAYMENT_RECORD = "payments:record"
    PAYMENT_LIST_FOR_INVOICE = "payments:list-for-invoice"

    NOTIFICATION_READ_OWN = "notifications:read-own"
    NOTIFICATION_CREATE = "notifications:create"

    SUPPORT_REQUEST_CREATE = "support-requests:create"
    SUPPORT_REQUEST_LIST = "support-requests:list"
    SUPPORT_REQUEST_MANAGE = "support-requests:manage"

    SYSTEM_LOG_READ = "system-logs:read"

    REPORT_READ = "reports:read"


CAPABILITIES: Dict[Operation, FrozenSet[UserRole]] = {
    Operation.AUTH_ME: ALL_ROLES,

    Operation.USER_LIST: ADMIN_ONLY,
    Operation.USER_CREATE: ADMIN_ONLY,
    Operation.USER_WRITE: ADMIN_ONLY,

    Operation.AREA_READ: MANAGERS,
    Operation.AREA_WRITE: ADMIN_ONLY,

    Operation.ROOM_READ: MANAGERS,
    Operation.ROOM_WRITE: ADMIN_ONLY,

    Operation.TENANT_READ: ALL_ROLES,
    Operation.TENANT_CREATE: MANAGERS,
    Operation.TENANT_WRITE: ADMIN_ONLY,
    Operation.TENANT_SELF: ALL_ROLES,

    Operation.CONTRACT_READ: MANAGERS,
    Operation.CONTRACT_CREATE: ADMIN_ONLY,
    Operation.CONTRACT_EXTEND: ADMIN_ONLY,
    Operation.CONTRACT_END: ADMIN_ONLY,
    Operation.CONTRACT_SELF: TENANT_ONLY,

    Operation.SERVICE_PRICE_READ: MANAGERS,
    Operation.SERVICE_PRICE_WRITE: ADMIN_ONLY,

    Operation.METER_READING_READ: MANAGERS,
    Operation.METER_READING_RECORD: MANAGERS,

    Operation.INVOICE_LIST: MANAGERS,
    Operation.INVOICE_SELF: TENANT_ONLY,
    Operation.INVOICE_GENERATE: MANAGERS,
    Operation.INVOICE_SET_STATUS: MANAGERS,
    Operation.INVOICE_REMIND: MANAGERS,

    Operation.PAYMENT_RECORD: MANAGERS,
    Operation.PAYMENT_LIST_FOR_INVOICE: ALL_ROLES,

    Operation.NOTIFICATION_READ_OWN: ALL_ROLES,
    Operation.NOTIFICATION_CREATE: ADMIN_ONLY,

    Operation.SUPPORT_REQUEST_CREATE: TENANT_ONLY,
    Operation.SUPPORT_REQUEST_LIST: ALL_ROLES,
    Operation.SUPPORT_REQUEST_MANAGE: MANAGERS,

    Operation.SYSTEM_LOG_READ: ADMIN_ONLY,

    Operation.REPORT_READ: MANAGERS,
}


def allowed_roles(operation: Operation) -> FrozenSet[UserRole]:
    """Roles granted an operation; unknown operations are granted to nobody."""
    return CAPABILITIES.get(operation, frozenset())


def is_allowed(role: UserRole, operation: Operation) -> bool:
    return role in allowed_roles(operation)
