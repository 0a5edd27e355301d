"""
Invoice repository for database operations.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.invoice import Invoice


class InvoiceRepository(BaseRepository[Invoice]):
    """Repository for invoice operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(Invoice, session)

    async def get_by_number(self, invoice_number: str) -> Optional[Invoice]:
        result = await self.session.execute(
            select(Invoice).where(Invoice.invoice_number == invoice_number)
        )
        return result.scalar_one_or_none()
