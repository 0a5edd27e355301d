"""
Database bootstrapping: table creation from the declarative metadata.
"""

from sqlalchemy.ext.asyncio import AsyncEngine

from app.db.base import Base
from app.core.logging import get_logger

logger = get_logger(__name__)


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables that do not exist yet.
    Importing app.models registers every model with Base.
    """
    import app.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info(
        "Database tables initialized",
        extra={"tables": sorted(Base.metadata.tables.keys())},
    )
