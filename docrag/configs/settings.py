"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from docrag.configs.base import BaseSettings
from docrag.configs.database import DatabaseSettings
from docrag.configs.embedding import EmbeddingSettings
from docrag.configs.generation import GenerationSettings
from docrag.configs.retrieval import RetrievalSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    retrieval: RetrievalSettings = Field(default_factory=RetrievalSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for the lifetime of the process.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from docrag.configs import get_settings
        settings = get_settings()
    """
    return Settings()
