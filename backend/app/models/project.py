"""
Project model for painting jobs.
"""

from sqlalchemy import Column, String, Text, Date, Integer, Numeric, JSON, ForeignKey, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
import enum

from app.db.base import Base, TimestampMixin


class ProjectStatus(str, enum.Enum):
    """Project status enumeration. Advisory only, any order is accepted."""
    PENDING = "pending"
    QUOTED = "quoted"
    APPROVED = "approved"
    PREPARING = "preparing"
    IN_PROGRESS = "in_progress"
    REVIEWING = "reviewing"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class ProjectPriority(str, enum.Enum):
    """Project priority enumeration."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Project(TimestampMixin, Base):
    """Project model for a job at a client address."""

    __tablename__ = "projects"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    address = Column(String(500), nullable=False)
    service_type = Column(String(100), nullable=False)
    status = Column(
        SQLEnum(ProjectStatus, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=ProjectStatus.PENDING,
        index=True,
    )
    priority = Column(
        SQLEnum(ProjectPriority, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=ProjectPriority.MEDIUM,
    )
    progress = Column(Integer, nullable=False, default=0)
    start_date = Column(Date, nullable=True)
    due_date = Column(Date, nullable=True)
    completed_date = Column(Date, nullable=True)
    total_cost = Column(Numeric(12, 2), nullable=True)
    assigned_staff = Column(JSON, nullable=True, default=list)  # staff ids as strings
    images = Column(JSON, nullable=True, default=list)  # image URLs

    # Relationships
    client = relationship("Client", back_populates="projects")
    quotes = relationship("Quote", back_populates="project")
    service_orders = relationship("ServiceOrder", back_populates="project")
