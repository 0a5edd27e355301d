"""
Health check response schemas.
"""

from pydantic import BaseModel
from typing import Dict, Literal


class HealthResponse(BaseModel):
    """Service status; degraded when any dependency check fails."""
    status: Literal["ok", "degraded"]
    uptime: str  # ISO-8601 duration, e.g. PT42S
    checks: Dict[str, Literal["ok", "error"]] = {}
