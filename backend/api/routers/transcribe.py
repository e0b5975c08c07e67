"""
Transcription API endpoint.

Routes:
- POST /api/transcribe - Speech to text for voice prompts

Dependencies: backend.boundary.speech
System role: Voice input HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from backend.api.deps import get_optional_user, get_transcriber
from backend.api.routers.router_utils import ERROR_RESPONSES
from backend.boundary.auth import AuthenticatedUser
from backend.boundary.speech import WhisperTranscriber
from backend.core.exceptions import TranscriptionError
from backend.models.upload import TranscriptionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transcribe", tags=["transcribe"], responses=ERROR_RESPONSES)


@router.post("", response_model=TranscriptionResponse)
async def transcribe(
    audio: UploadFile | None = File(default=None),
    user: AuthenticatedUser | None = Depends(get_optional_user),
    transcriber: WhisperTranscriber = Depends(get_transcriber),
) -> TranscriptionResponse:
    """
    Transcribe an audio clip.

    Raises:
        HTTPException(400): No audio file
        HTTPException(500): Transcription failed
    """
    if audio is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing audio file")

    data = await audio.read()
    logger.info(
        f"{__name__}:transcribe - {len(data)} bytes from "
        f"{user.user_id if user else 'anonymous'}"
    )
    try:
        transcript = await transcriber.transcribe(
            data,
            file_name=audio.filename or "audio.wav",
            content_type=audio.content_type or "audio/wav",
        )
    except TranscriptionError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Transcription failed",
        )

    return TranscriptionResponse(transcript=transcript, language=transcriber.language)
