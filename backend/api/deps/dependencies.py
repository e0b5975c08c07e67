"""
Dependency injection providers.

Factory functions for FastAPI dependencies. Every provider reads the
process-wide ServiceContainer from app.state; tests replace providers via
app.dependency_overrides.

Dependencies: backend.api.deps.container, backend.application.services
System role: DI providers for service injection
"""

from fastapi import Depends, Request

from backend.api.deps.container import ServiceContainer
from backend.application.services import (
    ChatService,
    PersistenceClient,
    SessionService,
    UploadService,
)
from backend.boundary.auth import TokenVerifier
from backend.boundary.speech import WhisperTranscriber


def get_services(request: Request) -> ServiceContainer:
    """Get the service container built by the application lifespan."""
    return request.app.state.services


def get_persistence_client(
    services: ServiceContainer = Depends(get_services),
) -> PersistenceClient:
    return services.persistence


def get_chat_service(services: ServiceContainer = Depends(get_services)) -> ChatService:
    """
    Get chat service instance.

    Args:
        services: Service container (injected via Depends)

    Returns:
        ChatService: Chat service wired with persistence, codegen and sandbox
    """
    return ChatService(deps=services.agent_dependencies)


def get_session_service(
    persistence: PersistenceClient = Depends(get_persistence_client),
) -> SessionService:
    """
    Get session service instance.

    Args:
        persistence: Persistence client (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(persistence=persistence)


def get_upload_service(
    persistence: PersistenceClient = Depends(get_persistence_client),
) -> UploadService:
    return UploadService(persistence=persistence)


def get_token_verifier(services: ServiceContainer = Depends(get_services)) -> TokenVerifier:
    return services.token_verifier


def get_transcriber(services: ServiceContainer = Depends(get_services)) -> WhisperTranscriber:
    return services.transcriber
