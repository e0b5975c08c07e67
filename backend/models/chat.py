"""
Chat domain models and schemas.

Request/response schemas for chat operations. Request fields are optional
so the router can answer missing fields with its own 400 body.

Dependencies: pydantic
System role: Chat API contracts
"""

from typing import Any

from pydantic import Field

from backend.models.common import CamelModel


class ChatRequest(CamelModel):
    """Request schema for chat messages."""

    session_id: str | None = Field(default=None, description="Target session")
    message: str | None = Field(default=None, description="User message")
    mode: str | None = Field(
        default=None,
        description="Mode hint: 'data-analysis', 'data-preparation' or anything else",
    )


class ChatArtifacts(CamelModel):
    """Payload attached to an assistant reply."""

    image_base64: str | None = None
    file_url: str | None = None
    file_name: str | None = None


class ChatResponse(CamelModel):
    """Response schema for chat messages."""

    assistant_message: str
    mode: str = Field(description="Intent served: ANALYSIS, PREPARATION or GENERAL")
    artifacts: ChatArtifacts | None = None


class ChatMessageResponse(CamelModel):
    """Single chat message in history."""

    id: str
    role: str = Field(description="Message role: 'user' or 'assistant'")
    content: str = Field(description="Message content")
    artifacts: dict[str, Any] | None = None
    created_at: str


class ChatHistoryResponse(CamelModel):
    """Response schema for chat history."""

    messages: list[ChatMessageResponse]
    total: int = Field(description="Total number of messages")
