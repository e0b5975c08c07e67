"""
Object storage settings.

Settings for the bucket holding uploaded and cleaned data files.

Dependencies: pydantic_settings
System role: Object storage configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Settings for S3-compatible object storage."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(default="data-files", description="Bucket for data files")
    region: str = Field(default="us-east-1", description="Bucket region")
    endpoint_url: str | None = Field(
        default=None,
        description="Custom endpoint for S3-compatible stores",
    )
    public_base_url: str | None = Field(
        default=None,
        description="Base URL for public object links; defaults to the S3 virtual-hosted URL",
    )
