"""
Chat service for intent-routed data assistance.

Orchestrates one chat turn: persist the user message, resolve intent,
run exactly one agent, persist the reply with its artifacts.

Dependencies: backend.core.agentic_system, backend.application.services.persistence
System role: Chat service orchestration layer
"""

import logging
from typing import Any

from pydantic import BaseModel

from backend.boundary.auth import AuthenticatedUser
from backend.core.agentic_system.agents import AgentDependencies, AgentResult, dispatch
from backend.core.agentic_system.intent import (
    Intent,
    build_conversation_context,
    resolve_intent,
)
from backend.core.exceptions import ChatProcessingError, DatagentException
from backend.observability.log_utils import truncate

logger = logging.getLogger(__name__)

FALLBACK_ASSISTANT_MESSAGE = "I encountered an error processing your request. Please try again."
ERROR_DETAIL_LIMIT = 300


class ChatResult(BaseModel):
    """Reply for one chat turn."""

    assistant_message: str
    mode: Intent
    artifacts: dict[str, Any] | None = None


def build_artifacts(intent: Intent, result: AgentResult) -> dict[str, Any] | None:
    """
    Artifact payload for an agent result, None when there is nothing to attach.

    Keys are camelCase because the payload is stored and returned as-is.
    """
    if intent == Intent.ANALYSIS and result.image_base64:
        return {"imageBase64": result.image_base64}
    if intent == Intent.PREPARATION and result.file_url and result.file_name:
        return {"fileUrl": result.file_url, "fileName": result.file_name}
    return None


class ChatService:
    """
    Chat service for one user turn at a time.

    Holds no per-request state; all request data flows through arguments.
    """

    def __init__(self, deps: AgentDependencies) -> None:
        """
        Initialize chat service.

        Args:
            deps: Persistence, code generation and sandbox handles
        """
        self.deps = deps

    async def _load_context(self, session_id: str) -> str:
        try:
            messages = await self.deps.persistence.get_session_messages(session_id)
        except Exception as e:
            logger.warning(f"{__name__}:_load_context - Could not load context: {e}")
            return ""
        return build_conversation_context(messages)

    async def handle_chat(
        self,
        session_id: str,
        message: str,
        mode: str | None,
        user: AuthenticatedUser,
    ) -> ChatResult:
        """
        Process a chat message through the full flow.

        Flow:
        1. Store user message
        2. Build classifier context from the last four messages
        3. Resolve intent (mode hint or classifier)
        4. Dispatch to the agent
        5. Store assistant reply with artifacts

        Args:
            session_id: Target session
            message: User's message
            mode: Optional mode hint ("data-analysis", "data-preparation")
            user: Authenticated caller

        Returns:
            ChatResult: Reply text, served intent and artifacts

        Raises:
            ChatProcessingError: Any failure outside the agents; a fallback
                assistant message has been stored best-effort
        """
        logger.info(
            f"{__name__}:handle_chat - session_id={session_id} user={user.user_id} "
            f"mode={mode} message={message[:50]!r}"
        )

        try:
            await self.deps.persistence.create_message(session_id, "user", message)

            context = await self._load_context(session_id)
            intent = await resolve_intent(self.deps.codegen, message, mode, context)

            served, result = await dispatch(intent, self.deps, session_id, message)
            artifacts = build_artifacts(served, result)

            await self.deps.persistence.create_message(
                session_id,
                "assistant",
                result.message,
                artifacts,
            )

            logger.info(
                f"{__name__}:handle_chat - Response ready mode={served.value} "
                f"artifacts={bool(artifacts)} length={len(result.message)}"
            )
            return ChatResult(assistant_message=result.message, mode=served, artifacts=artifacts)

        except Exception as e:
            logger.error(f"{__name__}:handle_chat - Error: {e}", exc_info=True)
            await self._store_fallback(session_id)
            error_text = e.message if isinstance(e, DatagentException) else str(e)
            raise ChatProcessingError(
                truncate(error_text, ERROR_DETAIL_LIMIT) or "Internal server error"
            ) from e

    async def _store_fallback(self, session_id: str) -> None:
        try:
            await self.deps.persistence.create_message(
                session_id,
                "assistant",
                FALLBACK_ASSISTANT_MESSAGE,
            )
        except Exception as e:
            logger.error(f"{__name__}:_store_fallback - Failed to save error message: {e}")
