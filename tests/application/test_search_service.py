"""
Test suite for SearchService.

System role: Verification of configured search defaults
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from docrag.application.services.search_service import SearchService
from docrag.core.retriever import SimilarityRetriever


@pytest.fixture
def mock_retriever() -> MagicMock:
    """Provide mock retriever."""
    retriever = MagicMock(spec=SimilarityRetriever)
    retriever.search = AsyncMock(return_value=[])
    return retriever


class TestSearch:
    """Test suite for SearchService.search()."""

    @pytest.mark.asyncio
    async def test_search_should_apply_defaults(self, mock_retriever: MagicMock) -> None:
        service = SearchService(mock_retriever, default_threshold=0.78, default_limit=5)

        await service.search("query")

        mock_retriever.search.assert_awaited_once_with("query", 0.78, 5)

    @pytest.mark.asyncio
    async def test_search_should_keep_explicit_zero_threshold(self, mock_retriever: MagicMock) -> None:
        service = SearchService(mock_retriever)

        await service.search("query", threshold=0.0, limit=2)

        mock_retriever.search.assert_awaited_once_with("query", 0.0, 2)
