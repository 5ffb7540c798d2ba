"""
Search service.

Thin wrapper over the similarity retriever applying configured defaults.

Dependencies: docrag.core.retriever
System role: Query-text search entrypoint
"""

from docrag.boundary.vdb.vector_schemas import SimilarityResult
from docrag.core.retriever import SimilarityRetriever


class SearchService:
    """Similarity search by query text."""

    def __init__(
        self,
        retriever: SimilarityRetriever,
        default_threshold: float = 0.78,
        default_limit: int = 5,
    ) -> None:
        self._retriever = retriever
        self._default_threshold = default_threshold
        self._default_limit = default_limit

    async def search(
        self,
        query: str,
        threshold: float | None = None,
        limit: int | None = None,
    ) -> list[SimilarityResult]:
        """
        Rank stored chunks against query text.

        Raises:
            ValidationError: Blank query, threshold or limit out of range
        """
        return await self._retriever.search(
            query,
            self._default_threshold if threshold is None else threshold,
            self._default_limit if limit is None else limit,
        )
