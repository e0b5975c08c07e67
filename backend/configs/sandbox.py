"""
E2B sandbox settings.

Dependencies: pydantic_settings
System role: Remote code execution configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SandboxSettings(BaseSettings):
    """Settings for the ephemeral E2B sandboxes that run generated scripts."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="E2B_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="E2B API key")
    template: str | None = Field(default=None, description="Sandbox template (SDK default if unset)")
    packages: list[str] = Field(
        default=["pandas", "matplotlib", "seaborn", "requests"],
        description="Packages installed before each run",
    )
    install_timeout: float = Field(default=120.0, description="Package install timeout in seconds")
    default_timeout: float = Field(default=60.0, description="Default script timeout in seconds")
    agent_timeout: float = Field(default=90.0, description="Script timeout used by the agents")
    script_path: str = Field(default="/tmp/script.py", description="Where the script is written")
