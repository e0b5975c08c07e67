"""
Test suite for PersistenceClient.

Runs against the in-memory SQLite database with a fake object store.

System role: Verification of the storage facade
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from backend.application.services.persistence import (
    DataVersionRecord,
    MessageRecord,
    PersistenceClient,
    SessionRecord,
)
from backend.core.exceptions import PersistenceError


class TestSessions:
    """Test suite for session operations."""

    @pytest.mark.asyncio
    async def test_create_and_get_session(self, persistence) -> None:
        # Act
        created = await persistence.create_session("user_1")
        fetched = await persistence.get_session(created.id)

        # Assert
        assert isinstance(created, SessionRecord)
        assert created.title == "New Chat"
        assert created.mode == "default"
        assert fetched == created

    @pytest.mark.asyncio
    async def test_get_session_should_return_none_for_missing(self, persistence) -> None:
        assert await persistence.get_session("missing") is None

    @pytest.mark.asyncio
    async def test_get_user_sessions_only_returns_owned(self, persistence) -> None:
        mine = await persistence.create_session("user_1", title="Mine")
        await persistence.create_session("user_2", title="Theirs")

        sessions = await persistence.get_user_sessions("user_1")

        assert [s.id for s in sessions] == [mine.id]


class TestMessages:
    """Test suite for message operations."""

    @pytest.mark.asyncio
    async def test_messages_round_trip_in_order(self, persistence) -> None:
        await persistence.create_message("s1", "user", "plot sales")
        await persistence.create_message("s1", "assistant", "done", {"imageBase64": "aGk="})

        messages = await persistence.get_session_messages("s1")

        assert all(isinstance(m, MessageRecord) for m in messages)
        assert [(m.role, m.content) for m in messages] == [("user", "plot sales"), ("assistant", "done")]
        assert messages[0].artifacts is None
        assert messages[1].artifacts == {"imageBase64": "aGk="}


class TestDataVersions:
    """Test suite for data version operations."""

    @pytest.mark.asyncio
    async def test_latest_count_and_list(self, persistence) -> None:
        assert await persistence.get_latest_data_version("s1") is None
        assert await persistence.count_data_versions("s1") == 0

        await persistence.create_data_version("s1", "v0", "sales.csv", "https://f/v0", 10, "Raw uploaded data")
        await persistence.create_data_version("s1", "v1", "cleaned_sales.csv", "https://f/v1", 8)

        latest = await persistence.get_latest_data_version("s1")
        versions = await persistence.get_session_data_versions("s1")

        assert isinstance(latest, DataVersionRecord)
        assert latest.version == "v1"
        assert [v.version for v in versions] == ["v1", "v0"]
        assert await persistence.count_data_versions("s1") == 2


class TestFilesAndHealth:
    """Test suite for storage delegation and health checks."""

    @pytest.mark.asyncio
    async def test_upload_file_delegates_to_storage(self, persistence, fake_storage) -> None:
        stored = await persistence.upload_file("s1", "sales.csv", b"a,b\n", "v0")

        fake_storage.upload.assert_awaited_once_with("s1", "sales.csv", b"a,b\n", "v0")
        assert stored.file_key == "s1/v0/sales.csv"
        assert stored.file_url == "https://files.test/s1/v0/sales.csv"

    @pytest.mark.asyncio
    async def test_download_file_delegates_to_storage(self, persistence, fake_storage) -> None:
        assert await persistence.download_file("s1/v0/sales.csv") == b"a,b\n1,2\n"

    @pytest.mark.asyncio
    async def test_check_health_true_for_live_database(self, persistence) -> None:
        assert await persistence.check_health() is True

    @pytest.mark.asyncio
    async def test_database_errors_become_persistence_errors(self, fake_storage) -> None:
        # Arrange: session factory whose sessions fail to open
        broken = MagicMock(side_effect=OperationalError("SELECT 1", {}, Exception("down")))
        client = PersistenceClient(broken, fake_storage)

        # Act / Assert
        with pytest.raises(PersistenceError) as exc_info:
            await client.create_message("s1", "user", "hi")
        assert exc_info.value.details["operation"] == "create_message"
        assert await client.check_health() is False
