"""
Speech-to-text boundary.

Exports: WhisperTranscriber
"""

from .whisper_client import WhisperTranscriber

__all__ = ["WhisperTranscriber"]
