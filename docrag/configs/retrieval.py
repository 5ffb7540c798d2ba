"""
Retrieval and ingestion configuration settings.

Selects the document store backend and holds the default ranking
parameters used by search and ask.

Dependencies: pydantic, pydantic_settings
System role: Document store and ranking configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RetrievalSettings(BaseSettings):
    """Document store selection and default ranking parameters."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RETRIEVAL_",
        case_sensitive=False,
        extra="ignore",
    )

    store_type: str = Field(
        default="postgres",
        description="Document store: 'postgres' (pgvector) or 'memory' for local dev",
    )
    similarity_threshold: float = Field(
        default=0.78,
        description="Default minimum similarity; results must score strictly above it",
        ge=0.0,
        le=1.0,
    )
    limit: int = Field(default=5, description="Default number of results", ge=1)
    ingest_concurrency: int = Field(
        default=8,
        description="Maximum pages embedded and stored at the same time",
        ge=1,
    )
