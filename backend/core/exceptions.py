"""
Exception hierarchy for the Datagent backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class DatagentException(Exception):
    """Base exception for all Datagent application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(DatagentException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class AuthenticationError(DatagentException):
    """Raised when a bearer token is missing, malformed, invalid or expired."""

    pass


class SessionNotFoundError(DatagentException):
    """Raised when a session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        super().__init__(f"Session not found: {session_id}", details)


class PersistenceError(DatagentException):
    """Raised when a relational store operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize persistence error.

        Args:
            message: Error message
            operation: Operation that failed (create_message, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class StorageError(DatagentException):
    """Raised when an object storage upload or download fails."""

    def __init__(
        self,
        message: str,
        file_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if file_key:
            details["file_key"] = file_key
        super().__init__(message, details)


class CodeGenerationError(DatagentException):
    """Raised when the text-generation service fails to produce output."""

    def __init__(
        self,
        message: str,
        prompt_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if prompt_name:
            details["prompt"] = prompt_name
        super().__init__(message, details)


class TranscriptionError(DatagentException):
    """Raised when speech-to-text transcription fails."""

    pass


class ChatProcessingError(DatagentException):
    """Raised when the chat pipeline fails after the request was accepted."""

    pass
