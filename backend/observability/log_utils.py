"""
Logging utilities.

Truncation for user-visible error excerpts and log lines, and structured
`extra` context that never fails on odd values (bytes, large collections).

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any


def truncate(text: str | None, limit: int) -> str:
    """Return at most ``limit`` characters of ``text`` ('' for None)."""
    if not text:
        return ""
    return text[:limit]


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Convert a value to a short string for log context.

    Bytes and collections are summarized by size instead of dumped.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    if isinstance(value, (bytes, bytearray)):
        return f"{type(value).__name__}({len(value)} bytes)"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"

    try:
        text = str(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"

    if len(text) > max_length:
        return text[:max_length] + f"... (truncated, {len(text)} total)"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    exc_info: bool = False,
    **context: Any,
) -> None:
    """
    Log a message with structured context.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        exc_info: Attach the active exception's traceback
        **context: Key-value pairs passed as `extra`
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    logger.log(level, message, extra=safe_context, exc_info=exc_info)
