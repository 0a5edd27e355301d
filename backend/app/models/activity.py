"""
Activity model: append-only feed of business events.
"""

from sqlalchemy import Column, String
from sqlalchemy.dialects.postgresql import UUID
import uuid

from app.db.base import Base, TimestampMixin


class Activity(TimestampMixin, Base):
    """Activity feed entry (client_created, quote_sent, ...)."""

    __tablename__ = "activities"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    type = Column(String(100), nullable=False, index=True)
    description = Column(String(1000), nullable=False)
    project_id = Column(UUID(as_uuid=True), nullable=True, index=True)
    client_id = Column(UUID(as_uuid=True), nullable=True, index=True)
