"""
Similarity retrieval.

Ranks stored chunks against a query vector or query text. All parameters
are validated before the embedding provider or the store is touched.

Dependencies: docrag.boundary.vdb, docrag.boundary.llm, docrag.core.validation
System role: RAG retrieval business logic
"""

import logging

from docrag.boundary.llm.embedding_provider import EmbeddingProvider
from docrag.boundary.vdb.document_store import DocumentStore
from docrag.boundary.vdb.vector_schemas import SimilarityResult
from docrag.core.validation import (
    validate_embedding,
    validate_query_text,
    validate_search_params,
)

logger = logging.getLogger(__name__)


class SimilarityRetriever:
    """Exact nearest-neighbour retrieval over the document store."""

    def __init__(self, store: DocumentStore, embedder: EmbeddingProvider) -> None:
        """
        Initialize retriever.

        Args:
            store: Document store holding chunk embeddings
            embedder: Provider used to embed query text
        """
        self._store = store
        self._embedder = embedder

    @property
    def dimension(self) -> int:
        return self._store.dimension

    async def retrieve(
        self,
        query_vector: list[float],
        threshold: float,
        limit: int,
    ) -> list[SimilarityResult]:
        """
        Rank chunks against a query vector.

        Args:
            query_vector: Vector of length D
            threshold: Results must score strictly above this value, in [0, 1]
            limit: Maximum number of results, >= 1

        Returns:
            Results ordered by similarity descending, chunk id ascending

        Raises:
            ValidationError: Malformed vector, threshold or limit
            StorageError: Store failure
        """
        validate_embedding(query_vector, self.dimension, field="query_vector")
        validate_search_params(threshold, limit)

        results = await self._store.query_similar(query_vector, threshold, limit)
        logger.info(
            f"{__name__}:retrieve - {len(results)} results (threshold={threshold}, limit={limit})"
        )
        return results

    async def search(
        self,
        query_text: str,
        threshold: float,
        limit: int,
    ) -> list[SimilarityResult]:
        """
        Embed query text, then rank chunks against it.

        Raises:
            ValidationError: Blank query, threshold or limit out of range
            ProviderError: Query embedding failed
            StorageError: Store failure
        """
        validate_query_text(query_text)
        validate_search_params(threshold, limit)

        query_vector = await self._embedder.embed(query_text)
        return await self.retrieve(query_vector, threshold, limit)
