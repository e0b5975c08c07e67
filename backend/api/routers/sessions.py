"""
Session API endpoints.

Routes:
- POST /api/sessions - Create new session
- GET /api/sessions - List the caller's sessions
- GET /api/sessions/{id}/messages - Get chat history
- GET /api/sessions/{id}/versions - Get data versions

Dependencies: backend.application.services.session_service, backend.models
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Body, Depends

from backend.api.deps import get_current_user, get_session_service
from backend.api.routers.router_utils import ERROR_RESPONSES, handle_service_errors
from backend.application.services.persistence import (
    DataVersionRecord,
    MessageRecord,
    SessionRecord,
)
from backend.application.services.session_service import SessionService
from backend.boundary.auth import AuthenticatedUser
from backend.models.chat import ChatHistoryResponse, ChatMessageResponse
from backend.models.session import (
    CreateSessionRequest,
    DataVersionListResponse,
    DataVersionResponse,
    SessionListResponse,
    SessionResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["sessions"], responses=ERROR_RESPONSES)


def _session_response(session: SessionRecord) -> SessionResponse:
    return SessionResponse(
        id=session.id,
        title=session.title,
        mode=session.mode,
        created_at=session.created_at.isoformat(),
    )


def _message_response(message: MessageRecord) -> ChatMessageResponse:
    return ChatMessageResponse(
        id=message.id,
        role=message.role,
        content=message.content,
        artifacts=message.artifacts,
        created_at=message.created_at.isoformat(),
    )


def _version_response(version: DataVersionRecord) -> DataVersionResponse:
    return DataVersionResponse(
        id=version.id,
        version=version.version,
        file_name=version.file_name,
        file_url=version.file_url,
        file_size=version.file_size,
        description=version.description,
        created_at=version.created_at.isoformat(),
    )


@router.post("", response_model=SessionResponse, response_model_by_alias=True)
@handle_service_errors
async def create_session(
    request: CreateSessionRequest | None = Body(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """
    Create new session.

    Args:
        request: Optional {title, mode}
        user: Authenticated caller
        session_service: Injected SessionService

    Returns:
        SessionResponse: {id, title, mode, createdAt}

    Raises:
        HTTPException(400): Unknown mode
        HTTPException(500): Creation failed
    """
    request = request or CreateSessionRequest()
    session = await session_service.create_session(
        user_id=user.user_id,
        title=request.title,
        mode=request.mode,
    )
    return _session_response(session)


@router.get("", response_model=SessionListResponse, response_model_by_alias=True)
@handle_service_errors
async def list_sessions(
    user: AuthenticatedUser = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> SessionListResponse:
    """List the caller's sessions, newest first."""
    sessions = await session_service.list_sessions(user.user_id)
    return SessionListResponse(
        sessions=[_session_response(s) for s in sessions],
        total=len(sessions),
    )


@router.get("/{session_id}/messages", response_model=ChatHistoryResponse, response_model_by_alias=True)
@handle_service_errors
async def get_session_messages(
    session_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> ChatHistoryResponse:
    """
    Get chat history of a session in creation order.

    Raises:
        HTTPException(404): Session missing or owned by another user
    """
    messages = await session_service.get_messages(session_id, user.user_id)
    return ChatHistoryResponse(
        messages=[_message_response(m) for m in messages],
        total=len(messages),
    )


@router.get("/{session_id}/versions", response_model=DataVersionListResponse, response_model_by_alias=True)
@handle_service_errors
async def get_session_versions(
    session_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    session_service: SessionService = Depends(get_session_service),
) -> DataVersionListResponse:
    """Get data versions of a session, newest first."""
    versions = await session_service.get_data_versions(session_id, user.user_id)
    return DataVersionListResponse(
        versions=[_version_response(v) for v in versions],
        total=len(versions),
    )
