"""Service orchestrators."""

from .chat_service import ChatResult, ChatService
from .persistence import (
    DataVersionRecord,
    MessageRecord,
    PersistenceClient,
    SessionRecord,
)
from .session_service import SessionService
from .upload_service import UploadResult, UploadService

__all__ = [
    "ChatResult",
    "ChatService",
    "DataVersionRecord",
    "MessageRecord",
    "PersistenceClient",
    "SessionRecord",
    "SessionService",
    "UploadResult",
    "UploadService",
]
