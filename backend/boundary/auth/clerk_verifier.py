"""
Clerk session token verification.

Verifies RS256 JWTs against the Clerk JWKS endpoint. Keys are fetched with
httpx and cached for a configurable TTL; a failed refresh keeps serving the
previous key set.

Dependencies: httpx, PyJWT
System role: Identity provider boundary
"""

import asyncio
import logging
import time
from typing import Any

import httpx
import jwt
from jwt import PyJWTError

from backend.boundary.auth.schema import AuthenticatedUser
from backend.configs.auth import AuthSettings
from backend.core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

BACKEND_API_JWKS_URL = "https://api.clerk.com/v1/jwks"


def resolve_jwks_url(settings: AuthSettings) -> str | None:
    """
    JWKS endpoint for the configured instance.

    Explicit URL first, then the issuer's well-known document, then the
    Backend API endpoint authenticated with the secret key.

    Returns:
        str | None: None when neither an issuer nor a secret key is configured
    """
    if settings.jwks_url:
        return settings.jwks_url
    if settings.issuer:
        return f"{settings.issuer.rstrip('/')}/.well-known/jwks.json"
    if settings.secret_key:
        return BACKEND_API_JWKS_URL
    return None


class ClerkTokenVerifier:
    """TokenVerifier for Clerk-issued session tokens."""

    def __init__(self, settings: AuthSettings) -> None:
        self._settings = settings
        self._jwks_url = resolve_jwks_url(settings)
        self._jwks_cache: dict | None = None
        self._jwks_cache_exp: float = 0.0
        self._jwks_lock: asyncio.Lock | None = None

    async def get_jwks_keys(self) -> dict:
        """
        Return the JWKS document, refreshing it when the cache expired.

        Raises:
            AuthenticationError: If no key set can be obtained
        """
        now = time.time()
        if self._jwks_cache and self._jwks_cache_exp > now:
            return self._jwks_cache

        if not self._jwks_url:
            raise AuthenticationError("Clerk issuer or secret key is not configured")

        if self._jwks_lock is None:
            self._jwks_lock = asyncio.Lock()

        async with self._jwks_lock:
            now = time.time()
            if self._jwks_cache and self._jwks_cache_exp > now:
                return self._jwks_cache
            try:
                async with httpx.AsyncClient(timeout=self._settings.jwks_timeout) as client:
                    headers = {}
                    if self._settings.secret_key:
                        headers["Authorization"] = f"Bearer {self._settings.secret_key}"
                    response = await client.get(self._jwks_url, headers=headers)
                    response.raise_for_status()
                    keys = response.json()
            except Exception as e:
                if self._jwks_cache:
                    logger.warning(f"{__name__}:get_jwks_keys - JWKS refresh failed; using cached keys: {e}")
                    return self._jwks_cache
                raise AuthenticationError(f"Failed to fetch JWKS: {e}") from e

            self._jwks_cache = keys
            self._jwks_cache_exp = now + max(60, self._settings.jwks_cache_ttl)
            return keys

    async def _decode(self, token: str) -> dict[str, Any]:
        jwks = await self.get_jwks_keys()
        header = jwt.get_unverified_header(token)
        kid = header.get("kid")

        key = None
        for jwk_key in jwks.get("keys", []):
            if jwk_key.get("kid") == kid:
                key = jwt.algorithms.RSAAlgorithm.from_jwk(jwk_key)
                break
        if key is None:
            raise AuthenticationError("No matching JWKS key", details={"kid": kid})

        return jwt.decode(
            token,
            key,
            algorithms=["RS256"],
            issuer=self._settings.issuer or None,
            leeway=self._settings.leeway,
            options={"verify_aud": False, "require": ["exp", "sub"]},
        )

    async def verify(self, token: str) -> AuthenticatedUser:
        """
        Verify a session token and extract the user.

        Args:
            token: Raw JWT without the "Bearer " prefix

        Returns:
            AuthenticatedUser: Identity from the token claims

        Raises:
            AuthenticationError: Invalid signature, expired token, wrong
                issuer or unauthorized party
        """
        try:
            claims = await self._decode(token)
        except PyJWTError as e:
            raise AuthenticationError(f"Token verification failed: {e}") from e

        parties = self._settings.authorized_parties
        azp = claims.get("azp")
        if parties and azp and azp not in parties:
            raise AuthenticationError("Unauthorized party", details={"azp": azp})

        return AuthenticatedUser(
            user_id=claims.get("sub") or "",
            email=claims.get("email") or None,
            first_name=claims.get("first_name") or None,
            last_name=claims.get("last_name") or None,
        )
