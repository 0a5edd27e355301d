"""
Health service.
Provides health check functionality.
"""

import time
from sqlalchemy.ext.asyncio import AsyncSession

from app.services.base_service import BaseService
from app.db.repositories.health_repository import HealthRepository
from app.schemas.health import HealthResponse

_STARTED_AT = time.time()


class HealthService(BaseService):
    """Service for health check operations."""

    def __init__(self, session: AsyncSession, started_at: float = _STARTED_AT):
        self.health_repo = HealthRepository(session)
        self.start_time = started_at

    async def get_health(self) -> HealthResponse:
        """
        Get system health status.

        Returns:
            HealthResponse with status, uptime, and checks
        """
        uptime_seconds = int(time.time() - self.start_time)
        uptime_str = f"PT{uptime_seconds}S"  # ISO 8601 duration format

        checks = {
            "database": "ok" if await self.health_repo.check_database() else "error",
        }

        status = "ok" if all(check == "ok" for check in checks.values()) else "degraded"

        return HealthResponse(
            status=status,
            uptime=uptime_str,
            checks=checks,
        )
