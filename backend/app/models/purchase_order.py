"""
Purchase order model for materials bought from suppliers.
"""

from sqlalchemy import Column, String, Date, Numeric, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
import enum

from app.db.base import Base, TimestampMixin


class PurchaseOrderStatus(str, enum.Enum):
    """Purchase order status enumeration."""
    DRAFT = "draft"
    SENT = "sent"
    RECEIVED = "received"
    PAID = "paid"
    CANCELLED = "cancelled"


class PurchaseOrder(TimestampMixin, Base):
    """Purchase order placed with a supplier."""

    __tablename__ = "purchase_orders"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    supplier_id = Column(UUID(as_uuid=True), ForeignKey("suppliers.id"), nullable=False, index=True)
    project_id = Column(UUID(as_uuid=True), ForeignKey("projects.id"), nullable=True, index=True)
    order_number = Column(String(50), nullable=False, unique=True, index=True)
    order_date = Column(Date, nullable=False)
    total_amount = Column(Numeric(12, 2), nullable=False)
    status = Column(
        SQLEnum(PurchaseOrderStatus, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=PurchaseOrderStatus.DRAFT,
        index=True,
    )
    notes = Column(String(2000), nullable=True)

    # Relationships
    supplier = relationship("Supplier", back_populates="purchase_orders")
