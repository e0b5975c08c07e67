"""
Core business logic module.

Contains the exception hierarchy, intent routing, code generation and the
data agents. All business rules and domain-specific logic reside here.
"""

from backend.core.exceptions import (
    AuthenticationError,
    ChatProcessingError,
    CodeGenerationError,
    DatagentException,
    PersistenceError,
    SessionNotFoundError,
    StorageError,
    TranscriptionError,
    ValidationError,
)

__all__ = [
    "DatagentException",
    "ValidationError",
    "AuthenticationError",
    "SessionNotFoundError",
    "PersistenceError",
    "StorageError",
    "CodeGenerationError",
    "TranscriptionError",
    "ChatProcessingError",
]
