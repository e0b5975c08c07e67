"""
Clerk authentication settings.

Dependencies: pydantic_settings
System role: Identity provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthSettings(BaseSettings):
    """Settings for verifying Clerk session tokens."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CLERK_",
        case_sensitive=False,
        extra="ignore",
    )

    secret_key: str = Field(default="", description="Clerk secret key")
    issuer: str = Field(default="", description="Clerk frontend API URL (token issuer)")
    jwks_url: str | None = Field(
        default=None,
        description="JWKS endpoint; defaults to the issuer well-known document, else the Backend API",
    )
    authorized_parties: list[str] = Field(
        default_factory=list,
        description="Accepted values of the azp claim (empty disables the check)",
    )
    jwks_cache_ttl: int = Field(default=3600, description="JWKS cache lifetime in seconds")
    jwks_timeout: float = Field(default=5.0, description="JWKS HTTP timeout in seconds")
    leeway: int = Field(default=5, description="Clock skew tolerance in seconds")
