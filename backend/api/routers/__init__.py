"""API routers."""

from .chat import router as chat_router
from .health import router as health_router
from .info import router as info_router
from .sessions import router as sessions_router
from .transcribe import router as transcribe_router
from .upload import router as upload_router

__all__ = [
    "chat_router",
    "health_router",
    "info_router",
    "sessions_router",
    "transcribe_router",
    "upload_router",
]
