"""
Service info endpoint.

Routes: GET /api

System role: Static capability listing
"""

from fastapi import APIRouter

from backend.models.health import ServiceInfoResponse

router = APIRouter(tags=["info"])

API_VERSION = "1.0.0"

ENDPOINTS = {
    "health": "GET /health",
    "chat": "POST /api/chat",
    "upload": "POST /api/upload",
    "transcribe": "POST /api/transcribe",
    "sessions": "POST /api/sessions",
}


@router.get("", response_model=ServiceInfoResponse)
async def service_info() -> ServiceInfoResponse:
    """List the public endpoints."""
    return ServiceInfoResponse(message="Datagent API", version=API_VERSION, endpoints=ENDPOINTS)
