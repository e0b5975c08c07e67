"""
Text-generation provider settings.

Gemini is the primary model for classification, code synthesis and chat.
OpenAI serves as the chat fallback and for Whisper transcription.

Dependencies: pydantic_settings
System role: LLM provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """API keys and model identifiers for the text-generation services."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    gemini_api_key: str = Field(default="", description="Google Gemini API key")
    gemini_model: str = Field(default="gemini-1.5-flash", description="Gemini model id")
    openai_api_key: str = Field(default="", description="OpenAI API key")
    openai_model: str = Field(default="gpt-4o-mini", description="OpenAI chat model id")
    whisper_model: str = Field(default="whisper-1", description="OpenAI transcription model")
    temperature: float = Field(default=0.0, description="Sampling temperature")
