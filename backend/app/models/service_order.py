"""
Service order model: work dispatch derived from an approved quote.
"""

from sqlalchemy import Column, String, Text, Date, DateTime, JSON, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
import enum

from app.db.base import Base, TimestampMixin


class ServiceOrderStatus(str, enum.Enum):
    """Service order status enumeration."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class AssigneeType(str, enum.Enum):
    """Who a service order is dispatched to."""
    STAFF = "staff"
    SUBCONTRACTOR = "subcontractor"


class ServiceOrder(TimestampMixin, Base):
    """Service order model."""

    __tablename__ = "service_orders"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    project_id = Column(UUID(as_uuid=True), ForeignKey("projects.id"), nullable=False, index=True)
    quote_id = Column(UUID(as_uuid=True), ForeignKey("quotes.id"), nullable=True, index=True)
    details = Column(Text, nullable=False)
    assigned_to = Column(UUID(as_uuid=True), nullable=True)  # staff or subcontractor id, see assigned_type
    assigned_type = Column(
        SQLEnum(AssigneeType, values_callable=lambda x: [e.value for e in x]),
        nullable=True,
    )
    supervisor_id = Column(UUID(as_uuid=True), ForeignKey("staff.id"), nullable=True)
    assigned_staff = Column(JSON, nullable=True, default=list)
    assigned_subcontractors = Column(JSON, nullable=True, default=list)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    due_date = Column(Date, nullable=True)
    status = Column(
        SQLEnum(ServiceOrderStatus, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=ServiceOrderStatus.PENDING,
        index=True,
    )
    materials_required = Column(Text, nullable=True)
    special_instructions = Column(Text, nullable=True)
    safety_requirements = Column(Text, nullable=True)
    client_signature = Column(Text, nullable=True)  # image data URL, captured once
    signed_date = Column(DateTime, nullable=True)
    before_images = Column(JSON, nullable=True, default=list)
    after_images = Column(JSON, nullable=True, default=list)
    language = Column(String(20), nullable=False, default="english")

    # Relationships
    project = relationship("Project", back_populates="service_orders")
    quote = relationship("Quote")
