"""
Whisper speech-to-text client.

Dependencies: openai
System role: Transcription of recorded voice prompts
"""

import logging

from openai import AsyncOpenAI, OpenAIError

from backend.core.exceptions import TranscriptionError

logger = logging.getLogger(__name__)


class WhisperTranscriber:
    """Transcribes audio with the OpenAI transcription endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str = "whisper-1",
        language: str = "en",
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._api_key = api_key
        self._model = model
        self._language = language
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        # Built on first use so a missing key only fails transcription requests
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key or None)
        return self._client

    @property
    def language(self) -> str:
        return self._language

    async def transcribe(
        self,
        audio: bytes,
        file_name: str = "audio.wav",
        content_type: str = "audio/wav",
    ) -> str:
        """
        Transcribe an audio clip.

        Args:
            audio: Raw audio bytes
            file_name: Original file name (format hint for the API)
            content_type: MIME type of the audio

        Returns:
            str: Transcript text

        Raises:
            TranscriptionError: If the API call fails
        """
        try:
            response = await self._get_client().audio.transcriptions.create(
                file=(file_name, audio, content_type),
                model=self._model,
                language=self._language,
            )
        except OpenAIError as e:
            logger.error(f"{__name__}:transcribe - Transcription failed: {e}")
            raise TranscriptionError(f"Transcription failed: {e}") from e

        logger.info(f"{__name__}:transcribe - Transcribed {len(audio)} bytes")
        return response.text
