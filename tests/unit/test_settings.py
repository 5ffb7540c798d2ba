"""
Test suite for configuration modules.

System role: Verification of environment-driven settings
"""

import pydantic
import pytest

from docrag.configs.base import BaseSettings
from docrag.configs.database import DatabaseSettings
from docrag.configs.embedding import EmbeddingSettings
from docrag.configs.retrieval import RetrievalSettings
from docrag.configs.settings import Settings


class TestSettings:
    """Test suite for settings defaults and env overrides."""

    def test_settings_should_have_retrieval_defaults(self) -> None:
        settings = Settings()

        assert settings.retrieval.similarity_threshold == 0.78
        assert settings.retrieval.limit == 5
        assert settings.embedding.dimension == 1536

    def test_embedding_settings_should_read_prefixed_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EMBEDDING_DIMENSION", "768")
        monkeypatch.setenv("EMBEDDING_MAX_ATTEMPTS", "5")

        settings = EmbeddingSettings()

        assert settings.dimension == 768
        assert settings.max_attempts == 5

    def test_retrieval_settings_should_reject_threshold_above_one(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RETRIEVAL_SIMILARITY_THRESHOLD", "1.5")

        with pytest.raises(pydantic.ValidationError):
            RetrievalSettings()

    def test_database_settings_should_build_asyncpg_url(self) -> None:
        settings = DatabaseSettings(host="db", port=5433, user="u", password="p", db="rag")

        assert settings.async_database_url == "postgresql+asyncpg://u:p@db:5433/rag"

    def test_database_settings_should_read_query_timeout_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("POSTGRES_QUERY_TIMEOUT", "4.5")

        settings = DatabaseSettings()

        assert settings.query_timeout == 4.5

    def test_database_settings_should_reject_non_positive_query_timeout(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            DatabaseSettings(query_timeout=0)

    def test_settings_should_expose_only_log_level_from_base(self) -> None:
        base_fields = set(BaseSettings.model_fields)

        assert base_fields == {"log_level"}
