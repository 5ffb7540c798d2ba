"""
Generative model configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Chat model configuration for answer composition
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GenerationSettings(BaseSettings):
    """Chat model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GENERATION_",
        case_sensitive=False,
        extra="ignore",
    )

    model: str = Field(default="gemini-2.5-flash", description="Google Gemini chat model ID")
    temperature: float = Field(default=0.0, description="Sampling temperature")
    timeout_seconds: float = Field(
        default=60.0,
        description="Deadline for receiving each streamed fragment",
        gt=0,
    )
