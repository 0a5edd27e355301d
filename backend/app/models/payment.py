"""
Payment model for outgoing payments to staff, subcontractors and suppliers.
"""

from sqlalchemy import Column, String, Date, Numeric, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
import uuid
import enum

from app.db.base import Base, TimestampMixin


class PaymentStatus(str, enum.Enum):
    """Payment status enumeration."""
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


class RecipientType(str, enum.Enum):
    """Payment recipient kind."""
    STAFF = "staff"
    SUBCONTRACTOR = "subcontractor"
    SUPPLIER = "supplier"


class PaymentMethod(str, enum.Enum):
    """How a payment was made."""
    CASH = "cash"
    CHECK = "check"
    TRANSFER = "transfer"
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    VENMO = "venmo"
    PAYPAL = "paypal"
    ZELLE = "zelle"
    OTHER = "other"


class Payment(TimestampMixin, Base):
    """Payment model."""

    __tablename__ = "payments"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    recipient_type = Column(
        SQLEnum(RecipientType, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
    )
    recipient_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    date = Column(Date, nullable=False)
    method = Column(
        SQLEnum(PaymentMethod, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
    )
    status = Column(
        SQLEnum(PaymentStatus, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=PaymentStatus.PENDING,
        index=True,
    )
    description = Column(String(1000), nullable=True)
    reference = Column(String(255), nullable=True)
    project_id = Column(UUID(as_uuid=True), ForeignKey("projects.id"), nullable=True, index=True)
    purchase_order_id = Column(UUID(as_uuid=True), ForeignKey("purchase_orders.id"), nullable=True, index=True)
