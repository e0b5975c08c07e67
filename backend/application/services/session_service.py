"""
Session service orchestrator.

Coordinates session lifecycle and read operations for a user.

Dependencies: backend.application.services.persistence
System role: Session use case orchestration
"""

from backend.application.services.persistence import (
    DataVersionRecord,
    MessageRecord,
    PersistenceClient,
    SessionRecord,
)
from backend.boundary.db.models import SessionMode
from backend.core.exceptions import SessionNotFoundError, ValidationError


class SessionService:
    """Session service orchestrator."""

    def __init__(self, persistence: PersistenceClient) -> None:
        """
        Initialize session service.

        Args:
            persistence: Storage facade
        """
        self.persistence = persistence

    async def create_session(
        self,
        user_id: str,
        title: str | None = None,
        mode: str | None = None,
    ) -> SessionRecord:
        """
        Create a new session.

        Args:
            user_id: Owner
            title: Display title ("New Chat" when empty)
            mode: Session mode ("default" when empty)

        Returns:
            SessionRecord: Created session

        Raises:
            ValidationError: If mode is not a known session mode
        """
        mode = mode or SessionMode.DEFAULT.value
        if mode not in {m.value for m in SessionMode}:
            raise ValidationError(f"Invalid mode: {mode}", field="mode")

        return await self.persistence.create_session(
            user_id=user_id,
            title=title or "New Chat",
            mode=mode,
        )

    async def list_sessions(self, user_id: str) -> list[SessionRecord]:
        """The user's sessions, newest first."""
        return await self.persistence.get_user_sessions(user_id)

    async def get_owned_session(self, session_id: str, user_id: str) -> SessionRecord:
        """
        Get a session owned by user_id.

        Raises:
            SessionNotFoundError: Missing, or owned by someone else
        """
        session = await self.persistence.get_session(session_id)
        if session is None or session.user_id != user_id:
            raise SessionNotFoundError(session_id)
        return session

    async def get_messages(self, session_id: str, user_id: str) -> list[MessageRecord]:
        """Message history of an owned session, oldest first."""
        await self.get_owned_session(session_id, user_id)
        return await self.persistence.get_session_messages(session_id)

    async def get_data_versions(self, session_id: str, user_id: str) -> list[DataVersionRecord]:
        """Data versions of an owned session, newest first."""
        await self.get_owned_session(session_id, user_id)
        return await self.persistence.get_session_data_versions(session_id)
