"""
Test suite for the CRUD layer against an in-memory SQLite database.

Covers ordering guarantees: sessions newest first, messages oldest first,
latest data version by creation time rather than label.

System role: Verification of session, message and data version persistence
"""

from datetime import datetime, timedelta, timezone

import pytest

from backend.boundary.db.CRUD import (
    DataVersionCRUD,
    MessageCRUD,
    SessionCRUD,
    data_version_crud,
    message_crud,
    session_crud,
)
from backend.boundary.db.models import DataVersionModel, MessageModel, SessionModel

T0 = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class TestCRUDInit:
    """Test suite for CRUD singletons."""

    def test_singletons_should_target_their_models(self) -> None:
        assert isinstance(session_crud, SessionCRUD)
        assert session_crud.model is SessionModel
        assert isinstance(message_crud, MessageCRUD)
        assert message_crud.model is MessageModel
        assert isinstance(data_version_crud, DataVersionCRUD)
        assert data_version_crud.model is DataVersionModel


class TestSessionCRUD:
    """Test suite for SessionCRUD."""

    @pytest.mark.asyncio
    async def test_create_should_apply_defaults(self, test_async_db) -> None:
        # Act
        session = await session_crud.create(test_async_db, user_id="user_1")

        # Assert
        assert len(session.id) == 36
        assert session.title == "New Chat"
        assert session.mode == "default"
        assert session.current_data_version == "v0"
        assert session.created_at is not None

    @pytest.mark.asyncio
    async def test_get_by_id_should_return_none_for_missing(self, test_async_db) -> None:
        assert await session_crud.get_by_id(test_async_db, "missing") is None

    @pytest.mark.asyncio
    async def test_get_by_user_should_return_newest_first_and_scope_owner(self, test_async_db) -> None:
        # Arrange
        old = await session_crud.create(test_async_db, user_id="user_1", title="old", created_at=T0)
        new = await session_crud.create(
            test_async_db, user_id="user_1", title="new", created_at=T0 + timedelta(minutes=5)
        )
        await session_crud.create(test_async_db, user_id="user_2", title="other")

        # Act
        sessions = await session_crud.get_by_user(test_async_db, "user_1")

        # Assert
        assert [s.id for s in sessions] == [new.id, old.id]


class TestMessageCRUD:
    """Test suite for MessageCRUD."""

    @pytest.mark.asyncio
    async def test_get_by_session_should_return_oldest_first(self, test_async_db) -> None:
        # Arrange
        await message_crud.create(
            test_async_db, session_id="s1", role="assistant", content="second",
            created_at=T0 + timedelta(seconds=1),
        )
        await message_crud.create(
            test_async_db, session_id="s1", role="user", content="first", created_at=T0,
        )
        await message_crud.create(test_async_db, session_id="s2", role="user", content="elsewhere")

        # Act
        messages = await message_crud.get_by_session(test_async_db, "s1")

        # Assert
        assert [m.content for m in messages] == ["first", "second"]

    @pytest.mark.asyncio
    async def test_create_should_store_artifacts_json(self, test_async_db) -> None:
        message = await message_crud.create(
            test_async_db,
            session_id="s1",
            role="assistant",
            content="chart",
            artifacts={"imageBase64": "aGk="},
        )

        stored = await message_crud.get_by_id(test_async_db, message.id)

        assert stored.artifacts == {"imageBase64": "aGk="}


class TestDataVersionCRUD:
    """Test suite for DataVersionCRUD."""

    @pytest.mark.asyncio
    async def test_get_latest_should_use_creation_time_not_label(self, test_async_db) -> None:
        # Arrange: label v9 is older than label v1
        await data_version_crud.create(
            test_async_db, session_id="s1", version="v9", file_name="a.csv",
            file_url="https://f/a.csv", created_at=T0,
        )
        await data_version_crud.create(
            test_async_db, session_id="s1", version="v1", file_name="b.csv",
            file_url="https://f/b.csv", created_at=T0 + timedelta(minutes=1),
        )

        # Act
        latest = await data_version_crud.get_latest(test_async_db, "s1")

        # Assert
        assert latest.version == "v1"

    @pytest.mark.asyncio
    async def test_get_latest_should_return_none_without_versions(self, test_async_db) -> None:
        assert await data_version_crud.get_latest(test_async_db, "s1") is None

    @pytest.mark.asyncio
    async def test_get_by_session_and_count(self, test_async_db) -> None:
        for i in range(3):
            await data_version_crud.create(
                test_async_db, session_id="s1", version=f"v{i}", file_name="d.csv",
                file_url="https://f/d.csv", created_at=T0 + timedelta(minutes=i),
            )
        await data_version_crud.create(
            test_async_db, session_id="s2", version="v0", file_name="d.csv", file_url="https://f/d.csv",
        )

        versions = await data_version_crud.get_by_session(test_async_db, "s1")

        assert [v.version for v in versions] == ["v2", "v1", "v0"]
        assert await data_version_crud.count_by_session(test_async_db, "s1") == 3
        assert await data_version_crud.count_by_session(test_async_db, "empty") == 0
