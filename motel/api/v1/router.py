"""
API v1 router aggregating every resource router.
"""

from fastapi import APIRouter

from motel.api.v1.endpoints import (
    areas,
    auth,
    contracts,
    invoices,
    meter_readings,
    notifications,
    payments,
    reports,
    rooms,
    service_prices,
    support_requests,
    system_logs,
    tenants,
    users,
)

api_router = APIRouter(
    responses={
        400: {"description": "Bad Request"},
        401: {"description": "Unauthorized"},
        403: {"description": "Forbidden"},
        404: {"description": "Not Found"},
        409: {"description": "Conflict"},
        422: {"description": "Validation Error"},
    }
)

api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(areas.router)
api_router.include_router(rooms.router)
api_router.include_router(tenants.router)
api_router.include_router(contracts.router)
api_router.include_router(service_prices.router)
api_router.include_router(meter_readings.router)
api_router.include_router(invoices.router)
api_router.include_router(payments.router)
api_router.include_router(notifications.router)
api_router.include_router(support_requests.router)
api_router.include_router(system_logs.router)
api_router.include_router(reports.router)
