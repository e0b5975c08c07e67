"""API-specific dependencies."""

# Re-export common dependencies
from .auth import get_current_user, get_optional_user
from .container import ServiceContainer
from .dependencies import (
    get_chat_service,
    get_persistence_client,
    get_services,
    get_session_service,
    get_token_verifier,
    get_transcriber,
    get_upload_service,
)

__all__ = [
    "ServiceContainer",
    "get_chat_service",
    "get_current_user",
    "get_optional_user",
    "get_persistence_client",
    "get_services",
    "get_session_service",
    "get_token_verifier",
    "get_transcriber",
    "get_upload_service",
]
