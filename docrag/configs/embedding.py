"""
Embedding provider configuration settings.

Model selection, fixed vector dimensionality and call limits for the
embedding provider.

Dependencies: pydantic, pydantic_settings
System role: Embedding provider configuration for ingestion and retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Embedding provider configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="EMBEDDING_",
        case_sensitive=False,
        extra="ignore",
    )

    model: str = Field(
        default="models/gemini-embedding-001",
        description="Google Gemini embedding model ID (supports reduced output dimensionality)",
    )
    dimension: int = Field(
        default=1536,
        description="Embedding vector dimension D, shared by every stored chunk",
        ge=1,
    )
    timeout_seconds: float = Field(
        default=30.0,
        description="Deadline for a single embedding request",
        gt=0,
    )
    max_attempts: int = Field(
        default=3,
        description="Attempts per embedding request before giving up",
        ge=1,
    )
