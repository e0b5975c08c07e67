"""
Chat API endpoint.

Routes:
- POST /api/chat - Route a message to an agent and return its reply

Dependencies: backend.application.services.chat_service, backend.models.chat
System role: Chat HTTP API
"""

import logging

from fastapi import APIRouter, Body, Depends, HTTPException, status

from backend.api.deps import get_chat_service, get_current_user
from backend.api.routers.router_utils import ERROR_RESPONSES
from backend.application.services.chat_service import ChatService
from backend.boundary.auth import AuthenticatedUser
from backend.core.exceptions import ChatProcessingError
from backend.models.chat import ChatArtifacts, ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"], responses=ERROR_RESPONSES)

MISSING_FIELDS = "Missing required fields: sessionId, message"


@router.post("", response_model=ChatResponse, response_model_exclude_none=True, response_model_by_alias=True)
async def chat(
    payload: ChatRequest | None = Body(default=None),
    user: AuthenticatedUser = Depends(get_current_user),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """
    Send a chat message.

    Args:
        payload: {sessionId, message, mode?}
        user: Authenticated caller (401 otherwise)
        chat_service: Injected ChatService

    Returns:
        ChatResponse: {assistantMessage, mode, artifacts?}

    Raises:
        HTTPException(400): sessionId or message missing
        HTTPException(500): Processing failed after the message was accepted
    """
    if payload is None or not payload.session_id or not payload.message:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=MISSING_FIELDS)

    try:
        result = await chat_service.handle_chat(
            session_id=payload.session_id,
            message=payload.message,
            mode=payload.mode,
            user=user,
        )
    except ChatProcessingError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message)

    artifacts = ChatArtifacts(**result.artifacts) if result.artifacts else None
    return ChatResponse(
        assistant_message=result.assistant_message,
        mode=result.mode.value,
        artifacts=artifacts,
    )
