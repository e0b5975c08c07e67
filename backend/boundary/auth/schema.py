"""
Authentication schemas and capability.

Dependencies: pydantic
System role: Identity passed from the auth boundary into services
"""

from typing import Protocol

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """Identity extracted from a verified session token."""

    user_id: str = Field(..., description="Identity provider subject (sub claim)")
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class TokenVerifier(Protocol):
    """Turns a bearer token into an identity or raises AuthenticationError."""

    async def verify(self, token: str) -> AuthenticatedUser:
        ...
