"""
Test suite for chat API endpoint.

Tests POST /api/chat with FastAPI TestClient: auth gate, body checks,
camelCase response shape and error mapping.

System role: Verification of chat HTTP API endpoint
"""

from unittest.mock import AsyncMock

from fastapi.testclient import TestClient

from backend.application.services.chat_service import ChatResult
from backend.core.agentic_system.intent import Intent
from backend.core.exceptions import ChatProcessingError


class TestChatAuth:
    """Test suite for the bearer token gate."""

    def test_missing_header_is_401(self, client: TestClient, mock_chat_service: AsyncMock) -> None:
        response = client.post("/api/chat", json={"sessionId": "s1", "message": "hi"})

        assert response.status_code == 401
        assert response.json() == {"error": "Missing or invalid authorization header"}
        mock_chat_service.handle_chat.assert_not_awaited()

    def test_non_bearer_header_is_401(self, client: TestClient, mock_chat_service: AsyncMock) -> None:
        response = client.post(
            "/api/chat",
            json={"sessionId": "s1", "message": "hi"},
            headers={"Authorization": "Basic abc"},
        )

        assert response.status_code == 401

    def test_rejected_token_is_401(self, client: TestClient, mock_chat_service: AsyncMock) -> None:
        response = client.post(
            "/api/chat",
            json={"sessionId": "s1", "message": "hi"},
            headers={"Authorization": "Bearer expired"},
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid or expired token"}

    def test_auth_checked_before_body(self, client: TestClient, mock_chat_service: AsyncMock) -> None:
        response = client.post("/api/chat", json={})

        assert response.status_code == 401


class TestChatBody:
    """Test suite for request body validation."""

    def test_missing_message_is_400(self, client, mock_chat_service, auth_headers) -> None:
        response = client.post("/api/chat", json={"sessionId": "s1"}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: sessionId, message"}
        mock_chat_service.handle_chat.assert_not_awaited()

    def test_empty_message_is_400(self, client, mock_chat_service, auth_headers) -> None:
        response = client.post("/api/chat", json={"sessionId": "s1", "message": ""}, headers=auth_headers)

        assert response.status_code == 400

    def test_no_body_is_400(self, client, mock_chat_service, auth_headers) -> None:
        response = client.post("/api/chat", headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: sessionId, message"}


class TestChatResponse:
    """Test suite for successful and failed chat turns."""

    def test_analysis_reply_shape(self, client, mock_chat_service, auth_headers, user) -> None:
        mock_chat_service.handle_chat.return_value = ChatResult(
            assistant_message="Here's your visualization!",
            mode=Intent.ANALYSIS,
            artifacts={"imageBase64": "iVBORw0K"},
        )

        response = client.post(
            "/api/chat",
            json={"sessionId": "s1", "message": "plot sales", "mode": "data-analysis"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert response.json() == {
            "assistantMessage": "Here's your visualization!",
            "mode": "ANALYSIS",
            "artifacts": {"imageBase64": "iVBORw0K"},
        }
        mock_chat_service.handle_chat.assert_awaited_once_with(
            session_id="s1",
            message="plot sales",
            mode="data-analysis",
            user=user,
        )

    def test_preparation_reply_shape(self, client, mock_chat_service, auth_headers) -> None:
        mock_chat_service.handle_chat.return_value = ChatResult(
            assistant_message="Cleaned",
            mode=Intent.PREPARATION,
            artifacts={"fileUrl": "https://files.test/s1/v1/cleaned_a.csv", "fileName": "cleaned_a.csv"},
        )

        response = client.post("/api/chat", json={"sessionId": "s1", "message": "dedupe"}, headers=auth_headers)

        assert response.json()["artifacts"] == {
            "fileUrl": "https://files.test/s1/v1/cleaned_a.csv",
            "fileName": "cleaned_a.csv",
        }

    def test_general_reply_has_no_artifacts(self, client, mock_chat_service, auth_headers) -> None:
        mock_chat_service.handle_chat.return_value = ChatResult(
            assistant_message="Hi there",
            mode=Intent.GENERAL,
        )

        response = client.post("/api/chat", json={"sessionId": "s1", "message": "hi"}, headers=auth_headers)

        assert response.json() == {"assistantMessage": "Hi there", "mode": "GENERAL"}

    def test_processing_error_is_500(self, client, mock_chat_service, auth_headers) -> None:
        mock_chat_service.handle_chat.side_effect = ChatProcessingError("insert failed")

        response = client.post("/api/chat", json={"sessionId": "s1", "message": "hi"}, headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"error": "insert failed"}
