"""
Health check API endpoints.

Routes: GET /health, GET /health/db

Dependencies: backend.application.services.persistence
System role: Health check HTTP API
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from backend.api.deps import get_persistence_client
from backend.application.services.persistence import PersistenceClient
from backend.models.health import DatabaseHealthResponse, HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/db", response_model=DatabaseHealthResponse)
async def health_check_db(
    persistence: PersistenceClient = Depends(get_persistence_client),
) -> DatabaseHealthResponse:
    """Database health check."""
    healthy = await persistence.check_health()
    return DatabaseHealthResponse(status="ok" if healthy else "degraded", database=healthy)
