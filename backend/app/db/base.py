"""
SQLAlchemy declarative base for models.
"""

from sqlalchemy import Column, DateTime, func
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


class TimestampMixin:
    """Adds a server-populated creation timestamp."""

    created_at = Column(DateTime, nullable=False, server_default=func.now(), index=True)
