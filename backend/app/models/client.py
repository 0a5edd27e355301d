"""
Client model for customer management.
"""

from sqlalchemy import Column, String, Text, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
import enum

from app.db.base import Base, TimestampMixin


class ClientClassification(str, enum.Enum):
    """Client classification enumeration."""
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"


class Client(TimestampMixin, Base):
    """Client model for customer management."""

    __tablename__ = "clients"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    address = Column(String(500), nullable=False)
    classification = Column(
        SQLEnum(ClientClassification, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=ClientClassification.RESIDENTIAL,
        index=True,
    )
    notes = Column(Text, nullable=True)

    # Relationships
    projects = relationship("Project", back_populates="client")
