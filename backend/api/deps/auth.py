"""
Authentication dependencies.

Dependencies: fastapi, backend.boundary.auth
System role: Bearer token gate for protected routes
"""

import logging

from fastapi import Depends, Header, HTTPException, status

from backend.api.deps.dependencies import get_token_verifier
from backend.boundary.auth import AuthenticatedUser, TokenVerifier

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


async def get_current_user(
    authorization: str | None = Header(default=None),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> AuthenticatedUser:
    """
    Require a valid bearer token.

    Raises:
        HTTPException(401): Header missing or not Bearer, or token rejected
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authorization header",
        )

    token = authorization[len(BEARER_PREFIX):]
    try:
        return await verifier.verify(token)
    except Exception as e:
        logger.warning(f"{__name__}:get_current_user - Token verification failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        ) from e


async def get_optional_user(
    authorization: str | None = Header(default=None),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> AuthenticatedUser | None:
    """Verified user when a valid bearer token is present, otherwise None."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    try:
        return await verifier.verify(authorization[len(BEARER_PREFIX):])
    except Exception as e:
        logger.debug(f"{__name__}:get_optional_user - Ignoring invalid token: {e}")
        return None
