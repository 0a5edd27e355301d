"""
Staff model for in-house crew members.
"""

from sqlalchemy import Column, String, JSON, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
import uuid
import enum

from app.db.base import Base, TimestampMixin


class StaffAvailability(str, enum.Enum):
    """Staff availability enumeration."""
    AVAILABLE = "available"
    ASSIGNED = "assigned"
    ON_LEAVE = "on_leave"


class Staff(TimestampMixin, Base):
    """Staff member."""

    __tablename__ = "staff"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(255), nullable=False, index=True)
    role = Column(String(100), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=False)
    availability = Column(
        SQLEnum(StaffAvailability, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=StaffAvailability.AVAILABLE,
    )
    skills = Column(JSON, nullable=True, default=list)
