"""
API v1 router that aggregates all endpoint routers.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import (
    health,
    clients,
    projects,
    quotes,
    service_orders,
    invoices,
    payments,
    staff,
    subcontractors,
    suppliers,
    purchase_orders,
    activities,
    calendar,
    reports,
)

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(clients.router, prefix="/clients", tags=["clients"])
api_router.include_router(projects.router, prefix="/projects", tags=["projects"])
api_router.include_router(quotes.router, prefix="/quotes", tags=["quotes"])
api_router.include_router(service_orders.router, prefix="/service-orders", tags=["service-orders"])
api_router.include_router(invoices.router, prefix="/invoices", tags=["invoices"])
api_router.include_router(payments.router, prefix="/payments", tags=["payments"])
api_router.include_router(staff.router, prefix="/staff", tags=["staff"])
api_router.include_router(subcontractors.router, prefix="/subcontractors", tags=["subcontractors"])
api_router.include_router(suppliers.router, prefix="/suppliers", tags=["suppliers"])
api_router.include_router(purchase_orders.router, prefix="/purchase-orders", tags=["purchase-orders"])
api_router.include_router(activities.router, prefix="/activities", tags=["activities"])
api_router.include_router(calendar.router, prefix="/calendar", tags=["calendar"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
