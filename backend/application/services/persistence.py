"""
Persistence client.

Single handle for the relational store and object storage. Each operation
runs in its own database session and commits before returning a plain
pydantic record, so callers never hold ORM state across awaits.

Dependencies: sqlalchemy, backend.boundary.db, backend.boundary.storage
System role: Storage facade used by the agents and the API services
"""

import logging
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker

from backend.boundary.db.CRUD import data_version_crud, message_crud, session_crud
from backend.boundary.storage import S3StorageClient, StoredFile
from backend.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class SessionRecord(BaseModel):
    """A user chat session."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    title: str
    mode: str
    current_data_version: str
    created_at: datetime
    updated_at: datetime


class MessageRecord(BaseModel):
    """One chat message, with optional artifact payload."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    session_id: str
    role: str
    content: str
    artifacts: dict[str, Any] | None = None
    created_at: datetime


class DataVersionRecord(BaseModel):
    """One stored snapshot of a session's dataset."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    session_id: str
    version: str
    file_name: str
    file_url: str
    file_size: int | None = None
    description: str | None = None
    created_at: datetime


class PersistenceClient:
    """Relational store and object storage behind one interface."""

    def __init__(
        self,
        session_factory: async_sessionmaker,
        storage: S3StorageClient,
    ) -> None:
        """
        Args:
            session_factory: Factory producing AsyncSession instances
            storage: Object storage client for data files
        """
        self._session_factory = session_factory
        self._storage = storage

    async def _run(self, operation: str, fn, *args, **kwargs):
        try:
            async with self._session_factory() as db:
                result = await fn(db, *args, **kwargs)
                await db.commit()
                return result
        except SQLAlchemyError as e:
            logger.error(f"{__name__}:{operation} - Database error: {e}")
            raise PersistenceError(f"Database operation failed: {e}", operation=operation) from e

    # Sessions

    async def create_session(
        self,
        user_id: str,
        title: str = "New Chat",
        mode: str = "default",
    ) -> SessionRecord:
        """Create a session owned by user_id."""
        row = await self._run(
            "create_session",
            session_crud.create,
            user_id=user_id,
            title=title,
            mode=mode,
            current_data_version="v0",
        )
        logger.info(f"{__name__}:create_session - Created session {row.id} for {user_id}")
        return SessionRecord.model_validate(row)

    async def get_session(self, session_id: str) -> SessionRecord | None:
        row = await self._run("get_session", session_crud.get_by_id, session_id)
        return SessionRecord.model_validate(row) if row else None

    async def get_user_sessions(self, user_id: str) -> list[SessionRecord]:
        """A user's sessions, newest first."""
        rows = await self._run("get_user_sessions", session_crud.get_by_user, user_id)
        return [SessionRecord.model_validate(r) for r in rows]

    # Messages

    async def create_message(
        self,
        session_id: str,
        role: str,
        content: str,
        artifacts: dict[str, Any] | None = None,
    ) -> MessageRecord:
        """
        Append a message to a session.

        Args:
            session_id: Owning session
            role: "user" or "assistant"
            content: Message text
            artifacts: Optional payload (imageBase64 or fileUrl/fileName)

        Returns:
            MessageRecord: Stored message
        """
        row = await self._run(
            "create_message",
            message_crud.create,
            session_id=session_id,
            role=role,
            content=content,
            artifacts=artifacts or None,
        )
        return MessageRecord.model_validate(row)

    async def get_session_messages(self, session_id: str) -> list[MessageRecord]:
        """All messages of a session, oldest first."""
        rows = await self._run("get_session_messages", message_crud.get_by_session, session_id)
        return [MessageRecord.model_validate(r) for r in rows]

    # Data versions

    async def create_data_version(
        self,
        session_id: str,
        version: str,
        file_name: str,
        file_url: str,
        file_size: int | None = None,
        description: str | None = None,
    ) -> DataVersionRecord:
        """Record a new data version; existing versions are never modified."""
        row = await self._run(
            "create_data_version",
            data_version_crud.create,
            session_id=session_id,
            version=version,
            file_name=file_name,
            file_url=file_url,
            file_size=file_size,
            description=description,
        )
        logger.info(f"{__name__}:create_data_version - {session_id} -> {version} ({file_name})")
        return DataVersionRecord.model_validate(row)

    async def get_latest_data_version(self, session_id: str) -> DataVersionRecord | None:
        """Most recently created version, None when nothing was uploaded."""
        row = await self._run("get_latest_data_version", data_version_crud.get_latest, session_id)
        return DataVersionRecord.model_validate(row) if row else None

    async def get_session_data_versions(self, session_id: str) -> list[DataVersionRecord]:
        """All versions of a session, newest first."""
        rows = await self._run("get_session_data_versions", data_version_crud.get_by_session, session_id)
        return [DataVersionRecord.model_validate(r) for r in rows]

    async def count_data_versions(self, session_id: str) -> int:
        return await self._run("count_data_versions", data_version_crud.count_by_session, session_id)

    # Files

    async def upload_file(
        self,
        session_id: str,
        file_name: str,
        data: bytes,
        version: str,
    ) -> StoredFile:
        """Store file bytes under {session_id}/{version}/{file_name}."""
        return await self._storage.upload(session_id, file_name, data, version)

    async def download_file(self, file_key: str) -> bytes:
        return await self._storage.download(file_key)

    async def check_health(self) -> bool:
        """True when the relational store answers a trivial query."""
        try:
            async with self._session_factory() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"{__name__}:check_health - Database health check failed: {e}")
            return False
