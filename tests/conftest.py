"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory database, persistence client with fake storage, fakes
for code generation and the sandbox, an authenticated user.
Dependencies: pytest, pytest_asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio


@pytest_asyncio.fixture
async def test_engine():
    """
    Create in-memory SQLite async engine with all tables.

    Yields:
        AsyncEngine: Engine shared by every session of one test
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool
    from backend.boundary.db.base import Base
    import backend.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    """async_sessionmaker bound to the test engine."""
    from backend.boundary.db.connection import get_async_session_factory

    return get_async_session_factory(test_engine)


@pytest_asyncio.fixture
async def test_async_db(session_factory):
    """
    Single AsyncSession for CRUD-level tests.

    Yields:
        AsyncSession: Test database session, rolled back afterwards
    """
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def fake_storage():
    """
    Create mock S3StorageClient.

    upload() returns a StoredFile under https://files.test/{session}/{version}/{name}.

    Returns:
        AsyncMock: Storage double
    """
    from backend.boundary.storage import S3StorageClient, StoredFile, build_file_key

    storage = AsyncMock(spec=S3StorageClient)

    async def upload(session_id, file_name, data, version):
        key = build_file_key(session_id, version, file_name)
        return StoredFile(file_url=f"https://files.test/{key}", file_key=key)

    storage.upload.side_effect = upload
    storage.download.return_value = b"a,b\n1,2\n"
    return storage


@pytest.fixture
def persistence(session_factory, fake_storage):
    """PersistenceClient over the in-memory database and fake storage."""
    from backend.application.services.persistence import PersistenceClient

    return PersistenceClient(session_factory, fake_storage)


@pytest.fixture
def mock_codegen():
    """
    Create mock CodeGenerationClient.

    Returns:
        AsyncMock: Code generation double with canned scripts and replies
    """
    from backend.core.agentic_system.generation import CodeGenerationClient

    codegen = AsyncMock(spec=CodeGenerationClient)
    codegen.classify.return_value = "GENERAL"
    codegen.generate_plot_code.return_value = "import pandas as pd\nprint('PLOT_SAVED')"
    codegen.generate_cleaning_code.return_value = "import pandas as pd\nprint('CLEANING_COMPLETE')"
    codegen.generate_chat_response.return_value = "Hello from Datagent"
    return codegen


@pytest.fixture
def mock_sandbox():
    """
    Create mock sandbox executor returning a successful run with a file.

    Returns:
        AsyncMock: SandboxExecutor double
    """
    from backend.boundary.sandbox import ExecutionResult

    sandbox = AsyncMock()
    sandbox.execute_with_file.return_value = ExecutionResult(
        stdout="Removed 3 duplicate rows\nCLEANING_COMPLETE",
        stderr="",
        success=True,
        exit_code=0,
        file_content=b"\x89PNG-bytes",
    )
    return sandbox


@pytest.fixture
def agent_deps(persistence, mock_codegen, mock_sandbox):
    """AgentDependencies wired with the real persistence client and fakes."""
    from backend.core.agentic_system.agents import AgentDependencies

    return AgentDependencies(
        persistence=persistence,
        codegen=mock_codegen,
        sandbox=mock_sandbox,
        timeout=90.0,
    )


@pytest.fixture
def user():
    """Authenticated test user."""
    from backend.boundary.auth import AuthenticatedUser

    return AuthenticatedUser(user_id="user_123", email="ada@example.com")


@pytest.fixture
def mock_token_verifier(user):
    """
    Token verifier accepting only the token "valid-token".

    Returns:
        MagicMock: TokenVerifier double
    """
    from backend.core.exceptions import AuthenticationError

    verifier = MagicMock()

    async def verify(token):
        if token != "valid-token":
            raise AuthenticationError("bad token")
        return user

    verifier.verify = AsyncMock(side_effect=verify)
    return verifier


@pytest.fixture
def auth_headers():
    """Authorization header accepted by mock_token_verifier."""
    return {"Authorization": "Bearer valid-token"}
