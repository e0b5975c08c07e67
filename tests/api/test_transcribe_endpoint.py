"""
Test suite for transcription API endpoint.

System role: Verification of voice input HTTP API
"""

from backend.core.exceptions import TranscriptionError

AUDIO = ("clip.webm", b"\x1aE\xdf\xa3webm", "audio/webm")


def test_transcribes_without_auth(client, mock_transcriber) -> None:
    response = client.post("/api/transcribe", files={"audio": AUDIO})

    assert response.status_code == 200
    assert response.json() == {"transcript": "plot sales by month", "language": "en"}
    mock_transcriber.transcribe.assert_awaited_once_with(
        b"\x1aE\xdf\xa3webm",
        file_name="clip.webm",
        content_type="audio/webm",
    )


def test_invalid_token_is_ignored(client, mock_transcriber) -> None:
    response = client.post(
        "/api/transcribe",
        files={"audio": AUDIO},
        headers={"Authorization": "Bearer expired"},
    )

    assert response.status_code == 200


def test_missing_audio_is_400(client, mock_transcriber) -> None:
    response = client.post("/api/transcribe")

    assert response.status_code == 400
    assert response.json() == {"error": "Missing audio file"}


def test_provider_failure_is_500(client, mock_transcriber) -> None:
    mock_transcriber.transcribe.side_effect = TranscriptionError("quota exceeded")

    response = client.post("/api/transcribe", files={"audio": AUDIO})

    assert response.status_code == 500
    assert response.json() == {"error": "Transcription failed"}
