"""
Subcontractor model.
"""

from sqlalchemy import Column, String, Text, Numeric, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
import uuid
import enum

from app.db.base import Base, TimestampMixin


class SubcontractorStatus(str, enum.Enum):
    """Subcontractor status enumeration."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class RateType(str, enum.Enum):
    """Billing basis for a subcontractor rate."""
    HOURLY = "hourly"
    DAILY = "daily"
    FIXED = "fixed"


class Subcontractor(TimestampMixin, Base):
    """Subcontractor model."""

    __tablename__ = "subcontractors"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(255), nullable=False, index=True)
    company = Column(String(255), nullable=True)
    specialty = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=False)
    address = Column(String(500), nullable=True)
    tax_id = Column(String(50), nullable=True)
    insurance_info = Column(String(500), nullable=True)
    rate = Column(Numeric(10, 2), nullable=True)
    rate_type = Column(
        SQLEnum(RateType, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=RateType.HOURLY,
    )
    notes = Column(Text, nullable=True)
    status = Column(
        SQLEnum(SubcontractorStatus, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=SubcontractorStatus.ACTIVE,
    )
