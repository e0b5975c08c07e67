"""
API routes module.

FastAPI routers for all HTTP endpoints. api_router and info_router are
mounted under /api; health_router sits at the root.
"""

from fastapi import APIRouter

from .routers import (
    chat_router,
    health_router,
    info_router,
    sessions_router,
    transcribe_router,
    upload_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(chat_router)
api_router.include_router(upload_router)
api_router.include_router(transcribe_router)
api_router.include_router(sessions_router)

__all__ = ["api_router", "health_router", "info_router"]
