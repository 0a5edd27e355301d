"""
Client service with business logic.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.cache import AppCache, REPORTS
from app.services.base_service import BaseService
from app.services.activity_service import ActivityService
from app.db.repositories.client_repository import ClientRepository
from app.schemas.client import ClientCreate, ClientUpdate, ClientResponse


class ClientService(BaseService):
    """Service for client operations."""

    def __init__(self, session: AsyncSession, cache: Optional[AppCache] = None):
        from app.deps.di_container import get_container

        self.session = session
        self.client_repo = ClientRepository(session)
        self.activities = ActivityService(session)
        self.cache = cache or get_container().app_cache()

    async def create_client(self, client_data: ClientCreate) -> ClientResponse:
        """Create a new client."""
        client = await self.client_repo.create(**client_data.model_dump())
        await self.activities.record(
            "client_created",
            f"New client added: {client.name}",
            client_id=client.id,
        )
        await self.commit_and_refresh(client)
        self.cache.invalidate(REPORTS)
        return ClientResponse.model_validate(client)

    async def get_client(self, client_id: UUID) -> Optional[ClientResponse]:
        """Get client by ID."""
        client = await self.client_repo.get(client_id)
        if not client:
            return None
        return ClientResponse.model_validate(client)

    async def list_clients(
        self,
        skip: int = 0,
        limit: int = 100,
        classification: Optional[str] = None,
        search: Optional[str] = None,
    ) -> tuple[List[ClientResponse], int]:
        """List clients with optional filters."""
        clients = await self.client_repo.list(
            skip=skip, limit=limit, search=search, classification=classification
        )
        total = await self.client_repo.count(search=search, classification=classification)
        return [ClientResponse.model_validate(client) for client in clients], total

    async def update_client(
        self,
        client_id: UUID,
        client_data: ClientUpdate,
    ) -> Optional[ClientResponse]:
        """Update a client."""
        client = await self.client_repo.get(client_id)
        if not client:
            return None

        update_dict = client_data.model_dump(exclude_unset=True)
        updated = await self.client_repo.update(client_id, **update_dict)
        await self.activities.record(
            "client_updated",
            f"Client updated: {updated.name}",
            client_id=client_id,
        )
        await self.commit_and_refresh(updated)
        self.cache.invalidate(REPORTS)
        return ClientResponse.model_validate(updated)

    async def delete_client(self, client_id: UUID) -> bool:
        """
        Delete a client.

        Raises:
            ValueError: the client still has projects
        """
        client = await self.client_repo.get(client_id)
        if not client:
            return False
        if await self.client_repo.has_projects(client_id):
            raise ValueError("Cannot delete a client that still has projects")

        name = client.name
        deleted = await self.client_repo.delete(client_id)
        await self.activities.record("client_deleted", f"Client deleted: {name}")
        await self.session.commit()
        self.cache.invalidate(REPORTS)
        return deleted
