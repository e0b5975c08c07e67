"""
Session domain models and schemas.

Dependencies: pydantic
System role: Session API contracts
"""

from pydantic import Field

from backend.models.common import CamelModel


class CreateSessionRequest(CamelModel):
    """Request schema for creating a session."""

    title: str | None = Field(default=None, description="Display title, 'New Chat' if omitted")
    mode: str | None = Field(default=None, description="Session mode, 'default' if omitted")


class SessionResponse(CamelModel):
    """Response schema for session data."""

    id: str
    title: str
    mode: str
    created_at: str


class SessionListResponse(CamelModel):
    """Response schema for a user's sessions."""

    sessions: list[SessionResponse]
    total: int


class DataVersionResponse(CamelModel):
    """One data version of a session."""

    id: str
    version: str
    file_name: str
    file_url: str
    file_size: int | None = None
    description: str | None = None
    created_at: str


class DataVersionListResponse(CamelModel):
    """Response schema for a session's data versions, newest first."""

    versions: list[DataVersionResponse]
    total: int
