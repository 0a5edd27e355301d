"""
Quote model: priced proposal for a project.
"""

from sqlalchemy import Column, String, Text, Date, Numeric, JSON, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
import enum

from app.db.base import Base, TimestampMixin


class QuoteStatus(str, enum.Enum):
    """Quote status enumeration."""
    DRAFT = "draft"
    SENT = "sent"
    APPROVED = "approved"
    REJECTED = "rejected"
    CONVERTED = "converted"


# Allowed moves between statuses; converted is terminal.
QUOTE_STATUS_TRANSITIONS = {
    QuoteStatus.DRAFT: {QuoteStatus.SENT, QuoteStatus.APPROVED, QuoteStatus.REJECTED},
    QuoteStatus.SENT: {QuoteStatus.APPROVED, QuoteStatus.REJECTED, QuoteStatus.DRAFT},
    QuoteStatus.REJECTED: {QuoteStatus.DRAFT},
    QuoteStatus.APPROVED: {QuoteStatus.CONVERTED},
    QuoteStatus.CONVERTED: set(),
}


def can_transition(current: QuoteStatus, target: QuoteStatus) -> bool:
    """Return True if a quote may move from current to target."""
    if current == target:
        return True
    return target in QUOTE_STATUS_TRANSITIONS[current]


class Quote(TimestampMixin, Base):
    """Quote model with itemized materials and labor."""

    __tablename__ = "quotes"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    project_id = Column(UUID(as_uuid=True), ForeignKey("projects.id"), nullable=False, index=True)
    materials_estimate = Column(JSON, nullable=False, default=list)
    labor_estimate = Column(JSON, nullable=False, default=list)
    profit_margin = Column(Numeric(5, 2), nullable=False, default=0)
    additional_costs = Column(Numeric(12, 2), nullable=False, default=0)
    total_estimate = Column(Numeric(12, 2), nullable=False, default=0)  # derived, never client-supplied
    scope_of_work = Column(Text, nullable=False, default="")
    optional_services = Column(JSON, nullable=False, default=list)
    status = Column(
        SQLEnum(QuoteStatus, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=QuoteStatus.DRAFT,
        index=True,
    )
    sent_date = Column(Date, nullable=True)
    valid_until = Column(Date, nullable=True)
    approved_date = Column(Date, nullable=True)
    rejected_date = Column(Date, nullable=True)
    notes = Column(String(2000), nullable=True)

    # Relationships
    project = relationship("Project", back_populates="quotes")
