"""
Test suite for WhisperTranscriber.

System role: Verification of speech-to-text boundary
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from openai import OpenAIError

from backend.boundary.speech import WhisperTranscriber
from backend.core.exceptions import TranscriptionError


@pytest.fixture
def openai_client() -> MagicMock:
    client = MagicMock()
    client.audio.transcriptions.create = AsyncMock(return_value=SimpleNamespace(text="plot sales by month"))
    return client


@pytest.mark.asyncio
async def test_transcribe_returns_text(openai_client) -> None:
    transcriber = WhisperTranscriber(api_key="sk-test", client=openai_client)

    text = await transcriber.transcribe(b"RIFF....", file_name="clip.webm", content_type="audio/webm")

    assert text == "plot sales by month"
    openai_client.audio.transcriptions.create.assert_awaited_once_with(
        file=("clip.webm", b"RIFF....", "audio/webm"),
        model="whisper-1",
        language="en",
    )


@pytest.mark.asyncio
async def test_api_error_raises_transcription_error(openai_client) -> None:
    openai_client.audio.transcriptions.create.side_effect = OpenAIError("quota exceeded")
    transcriber = WhisperTranscriber(api_key="sk-test", client=openai_client)

    with pytest.raises(TranscriptionError):
        await transcriber.transcribe(b"RIFF....")


def test_language_defaults_to_english() -> None:
    assert WhisperTranscriber(api_key="").language == "en"
