"""
Test suite for the document store factory.

System role: Verification of store backend selection
"""

from unittest.mock import MagicMock, patch

import pytest

from docrag.boundary.vdb.memory_store import InMemoryDocumentStore
from docrag.boundary.vdb.pgvector_store import PgVectorDocumentStore
from docrag.boundary.vdb.store_factory import get_document_store
from docrag.configs.database import DatabaseSettings
from docrag.configs.retrieval import RetrievalSettings
from docrag.configs.settings import Settings


def _settings(store_type: str) -> Settings:
    return Settings(retrieval=RetrievalSettings(store_type=store_type))


class TestGetDocumentStore:
    """Test suite for get_document_store()."""

    def test_get_document_store_should_build_memory_store(self) -> None:
        settings = _settings("memory")

        store = get_document_store(settings)

        assert isinstance(store, InMemoryDocumentStore)
        assert store.dimension == settings.embedding.dimension

    def test_get_document_store_should_build_pgvector_store(self) -> None:
        # Arrange
        settings = _settings("postgres")

        # Act
        with patch("docrag.boundary.db.connection.get_async_engine", return_value=MagicMock()) as mock_engine, patch(
            "docrag.boundary.db.connection.get_async_session_factory", return_value=MagicMock()
        ):
            store = get_document_store(settings)

        # Assert
        assert isinstance(store, PgVectorDocumentStore)
        mock_engine.assert_called_once()

    def test_get_document_store_should_use_query_timeout_as_storage_deadline(self) -> None:
        # Arrange
        settings = Settings(
            retrieval=RetrievalSettings(store_type="postgres"),
            database=DatabaseSettings(pool_timeout=30, query_timeout=12.5),
        )

        # Act
        with patch("docrag.boundary.db.connection.get_async_engine", return_value=MagicMock()), patch(
            "docrag.boundary.db.connection.get_async_session_factory", return_value=MagicMock()
        ):
            store = get_document_store(settings)

        # Assert
        assert store._timeout == 12.5

    def test_get_document_store_should_reject_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="RETRIEVAL_STORE_TYPE"):
            get_document_store(_settings("redis"))
