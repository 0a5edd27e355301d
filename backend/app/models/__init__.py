"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from app.models.client import Client
from app.models.project import Project
from app.models.quote import Quote
from app.models.service_order import ServiceOrder
from app.models.invoice import Invoice
from app.models.payment import Payment
from app.models.staff import Staff
from app.models.subcontractor import Subcontractor
from app.models.supplier import Supplier
from app.models.purchase_order import PurchaseOrder
from app.models.activity import Activity

__all__ = [
    "Client",
    "Project",
    "Quote",
    "ServiceOrder",
    "Invoice",
    "Payment",
    "Staff",
    "Subcontractor",
    "Supplier",
    "PurchaseOrder",
    "Activity",
]
