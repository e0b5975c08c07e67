"""
Router error handling utilities.

Provides a decorator mapping service-layer exceptions to HTTPExceptions so
every endpoint answers with the same status codes and error body.

Dependencies: fastapi, backend.core.exceptions, backend.observability.log_utils
System role: Exception-to-status mapping for routers
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from backend.core.exceptions import (
    PersistenceError,
    SessionNotFoundError,
    StorageError,
    ValidationError,
)
from backend.models.common import ErrorResponse
from backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def handle_service_errors(func: F) -> F:
    """
    Decorator to transform service exceptions into HTTPExceptions.

    - ValidationError -> 400
    - SessionNotFoundError -> 404
    - StorageError -> 502
    - PersistenceError and anything unexpected -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except ValidationError as e:
            log_with_context(logger, logging.WARNING, "Invalid request", endpoint=func.__name__, error=e)
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except SessionNotFoundError as e:
            log_with_context(logger, logging.WARNING, "Session not found", endpoint=func.__name__, error=e)
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")

        except StorageError as e:
            log_with_context(logger, logging.ERROR, "Storage failure", endpoint=func.__name__, error=e)
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

        except PersistenceError as e:
            log_with_context(logger, logging.ERROR, "Persistence failure", endpoint=func.__name__, error=e)
            raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message)

        except Exception as e:
            log_with_context(
                logger,
                logging.ERROR,
                "Unexpected failure in request",
                exc_info=True,
                endpoint=func.__name__,
                error=e,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Internal server error",
            )

    return wrapper  # type: ignore
