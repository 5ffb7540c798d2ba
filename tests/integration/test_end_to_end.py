"""
End-to-end retrieval test over the in-memory store.

Loads a three-page document through DocumentService and queries it
through SearchService with the default ranking parameters.

System role: Verification of the write and read paths together
"""

from unittest.mock import MagicMock

import pytest

from docrag.application.services import DocumentService, SearchService
from docrag.boundary.llm.embedding_provider import EmbeddingProvider
from docrag.boundary.vdb.memory_store import InMemoryDocumentStore
from docrag.core.document_processing import IngestionPipeline
from docrag.core.document_processing.tasks import PdfPageLoader
from docrag.core.retriever import SimilarityRetriever

PAGES = {
    1: "Chapter one introduces vector databases\nand their storage layout.",
    2: "Chapter two explains cosine similarity\nbetween embedding vectors.",
    3: "Chapter three covers HNSW graph indexes\nfor approximate search.",
}


@pytest.mark.asyncio
async def test_query_with_page_text_should_rank_that_page_first(
    memory_store: InMemoryDocumentStore, embedder: EmbeddingProvider
) -> None:
    # Arrange
    loader = MagicMock(spec=PdfPageLoader)
    loader.load.return_value = PAGES
    documents = DocumentService(memory_store, IngestionPipeline(memory_store, embedder), loader)
    search = SearchService(SimilarityRetriever(memory_store, embedder), default_threshold=0.78, default_limit=5)
    _, ingestion = await documents.load_file("book.pdf")

    # Act
    results = await search.search(PAGES[2])

    # Assert
    assert ingestion.stored_chunks == 3
    assert results[0].position == 2
    assert results[0].similarity > 0.9
    assert results[0].content == PAGES[2]
