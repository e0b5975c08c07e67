"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI and a non-fatal
check for missing required values.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

import logging
from functools import lru_cache

from backend.configs.auth import AuthSettings
from backend.configs.base import BaseSettings
from backend.configs.database import DatabaseSettings
from backend.configs.llm import LLMSettings
from backend.configs.sandbox import SandboxSettings
from backend.configs.storage import StorageSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    database: DatabaseSettings = DatabaseSettings()
    llm: LLMSettings = LLMSettings()
    sandbox: SandboxSettings = SandboxSettings()
    storage: StorageSettings = StorageSettings()
    auth: AuthSettings = AuthSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from backend.configs import get_settings
        settings = get_settings()
    """
    return Settings()


def validate_config(settings: Settings) -> list[str]:
    """
    Report required settings that are missing.

    Missing values only produce a warning; the affected features fail
    later when they are used.

    Args:
        settings: Settings to check

    Returns:
        list[str]: Environment variable names that are unset
    """
    required = {
        "GEMINI_API_KEY": settings.llm.gemini_api_key,
        "E2B_API_KEY": settings.sandbox.api_key,
        "OPENAI_API_KEY": settings.llm.openai_api_key,
        # Either one locates the JWKS endpoint
        "CLERK_SECRET_KEY": settings.auth.secret_key or settings.auth.issuer,
        "DATABASE_URL": settings.database.is_configured,
    }
    missing = [name for name, value in required.items() if not value]

    if missing:
        logger.warning(f"Missing environment variables: {', '.join(missing)}")
        logger.warning("Some features may not work correctly.")

    return missing
