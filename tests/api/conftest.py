"""
Fixtures for HTTP API tests.

Builds the real application (exception handlers, middleware, routers) and
replaces service providers through dependency_overrides. The lifespan is
not run, so nothing touches real infrastructure.

Dependencies: fastapi.testclient
System role: API test infrastructure
"""

from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from backend.api.deps import (
    get_chat_service,
    get_persistence_client,
    get_session_service,
    get_token_verifier,
    get_transcriber,
    get_upload_service,
)
from backend.application.services import ChatService, SessionService, UploadService
from backend.configs import Settings
from backend.main import create_app


@pytest.fixture
def app(mock_token_verifier) -> FastAPI:
    """Application with the token verifier replaced."""
    app = create_app(Settings())
    app.dependency_overrides[get_token_verifier] = lambda: mock_token_verifier
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def mock_chat_service(app: FastAPI) -> AsyncMock:
    service = AsyncMock(spec=ChatService)
    app.dependency_overrides[get_chat_service] = lambda: service
    return service


@pytest.fixture
def mock_session_service(app: FastAPI) -> AsyncMock:
    service = AsyncMock(spec=SessionService)
    app.dependency_overrides[get_session_service] = lambda: service
    return service


@pytest.fixture
def mock_upload_service(app: FastAPI) -> AsyncMock:
    service = AsyncMock(spec=UploadService)
    app.dependency_overrides[get_upload_service] = lambda: service
    return service


@pytest.fixture
def mock_transcriber(app: FastAPI) -> AsyncMock:
    transcriber = AsyncMock()
    transcriber.language = "en"
    transcriber.transcribe.return_value = "plot sales by month"
    app.dependency_overrides[get_transcriber] = lambda: transcriber
    return transcriber


@pytest.fixture
def mock_persistence(app: FastAPI) -> AsyncMock:
    persistence = AsyncMock()
    app.dependency_overrides[get_persistence_client] = lambda: persistence
    return persistence
