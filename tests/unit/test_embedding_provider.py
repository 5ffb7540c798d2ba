"""
Test suite for EmbeddingProvider.

Tests newline normalization, retry with backoff, deadline handling and
response dimension checks. Uses mocked LangChain embeddings.

System role: Verification of the embedding provider client
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding, Embeddings

from docrag.boundary.llm.embedding_provider import EmbeddingProvider, get_embedding_provider
from docrag.configs.settings import Settings
from docrag.core.exceptions import ProviderError

DIMENSION = 4
VECTOR = [0.1, 0.2, 0.3, 0.4]


@pytest.fixture
def mock_embeddings() -> MagicMock:
    """Provide mock LangChain embeddings returning a fixed vector."""
    embeddings = MagicMock(spec=Embeddings)
    embeddings.aembed_query = AsyncMock(return_value=VECTOR)
    return embeddings


def _provider(embeddings, **kwargs) -> EmbeddingProvider:
    options = {
        "dimension": DIMENSION,
        "timeout_seconds": 1.0,
        "max_attempts": 3,
        "backoff_initial": 0,
        "backoff_max": 0,
    }
    options.update(kwargs)
    return EmbeddingProvider(embeddings=embeddings, **options)


class TestEmbed:
    """Test suite for EmbeddingProvider.embed()."""

    @pytest.mark.asyncio
    async def test_embed_should_replace_newlines_with_spaces(self, mock_embeddings: MagicMock) -> None:
        # Arrange
        provider = _provider(mock_embeddings)

        # Act
        vector = await provider.embed("first line\nsecond line\n")

        # Assert
        assert vector == VECTOR
        mock_embeddings.aembed_query.assert_awaited_once_with("first line second line ")

    @pytest.mark.asyncio
    async def test_embed_should_retry_transient_failures(self, mock_embeddings: MagicMock) -> None:
        # Arrange
        mock_embeddings.aembed_query = AsyncMock(side_effect=[RuntimeError("429"), VECTOR])
        provider = _provider(mock_embeddings)

        # Act
        vector = await provider.embed("text")

        # Assert
        assert vector == VECTOR
        assert mock_embeddings.aembed_query.await_count == 2

    @pytest.mark.asyncio
    async def test_embed_should_raise_provider_error_after_max_attempts(
        self, mock_embeddings: MagicMock
    ) -> None:
        # Arrange
        mock_embeddings.aembed_query = AsyncMock(side_effect=RuntimeError("unavailable"))
        provider = _provider(mock_embeddings, max_attempts=3)

        # Act
        with pytest.raises(ProviderError) as exc_info:
            await provider.embed("text")

        # Assert
        assert mock_embeddings.aembed_query.await_count == 3
        assert exc_info.value.details["provider"] == "embedding"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_embed_should_raise_provider_error_on_timeout(self, mock_embeddings: MagicMock) -> None:
        # Arrange
        async def slow_embed(text: str) -> list[float]:
            await asyncio.sleep(1)
            return VECTOR

        mock_embeddings.aembed_query = AsyncMock(side_effect=slow_embed)
        provider = _provider(mock_embeddings, timeout_seconds=0.01, max_attempts=1)

        # Act / Assert
        with pytest.raises(ProviderError, match="exceeded"):
            await provider.embed("text")

    @pytest.mark.asyncio
    async def test_embed_should_reject_wrong_dimension_response(self, mock_embeddings: MagicMock) -> None:
        # Arrange
        mock_embeddings.aembed_query = AsyncMock(return_value=[0.1, 0.2])
        provider = _provider(mock_embeddings)

        # Act / Assert
        with pytest.raises(ProviderError, match="Malformed"):
            await provider.embed("text")

    @pytest.mark.asyncio
    async def test_embed_should_be_deterministic_for_identical_text(self) -> None:
        provider = _provider(DeterministicFakeEmbedding(size=DIMENSION))

        first = await provider.embed("same text")
        second = await provider.embed("same text")

        assert first == second
        assert len(first) == DIMENSION


class TestGetEmbeddingProvider:
    """Test suite for get_embedding_provider() factory."""

    def test_get_embedding_provider_should_use_configured_dimension(self) -> None:
        # Arrange
        settings = Settings()

        # Act
        with patch("docrag.boundary.llm.embeddings_wrapper.FixedDimensionEmbeddings") as mock_cls:
            provider = get_embedding_provider(settings)

        # Assert
        mock_cls.assert_called_once_with(
            model=settings.embedding.model,
            output_dimensionality=settings.embedding.dimension,
        )
        assert provider.dimension == settings.embedding.dimension
