"""
Upload and transcription schemas.

Dependencies: pydantic
System role: File intake API contracts
"""

from backend.models.common import CamelModel


class UploadResponse(CamelModel):
    """Response schema for a raw data upload."""

    success: bool = True
    file_name: str
    file_size: int
    file_url: str
    version: str


class TranscriptionResponse(CamelModel):
    """Response schema for speech transcription."""

    transcript: str
    language: str
