"""
Supplier model for paint and material vendors.
"""

from sqlalchemy import Column, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid

from app.db.base import Base, TimestampMixin


class Supplier(TimestampMixin, Base):
    """Supplier model."""

    __tablename__ = "suppliers"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(255), nullable=False, index=True)
    contact_name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(50), nullable=True)
    address = Column(String(500), nullable=True)
    category = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)

    # Relationships
    purchase_orders = relationship("PurchaseOrder", back_populates="supplier")
