"""Shared router helpers."""

from .error_handling import ERROR_RESPONSES, handle_service_errors

__all__ = ["ERROR_RESPONSES", "handle_service_errors"]
