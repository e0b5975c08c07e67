"""
Authentication boundary.

Exports: AuthenticatedUser, ClerkTokenVerifier, TokenVerifier
"""

from .clerk_verifier import ClerkTokenVerifier
from .schema import AuthenticatedUser, TokenVerifier

__all__ = ["AuthenticatedUser", "ClerkTokenVerifier", "TokenVerifier"]
