"""
Vector store boundary layer.

Provides the document store contract, its backends and the similarity
metric used for ranking.
- PgVectorDocumentStore: Production PostgreSQL + pgvector store
- InMemoryDocumentStore: Development store (numpy exact scan)

Dependencies: sqlalchemy, pgvector, numpy
System role: Storage adapter for RAG retrieval
"""

from docrag.boundary.vdb.similarity import cosine_distance, cosine_similarity, rank_candidates
from docrag.boundary.vdb.vector_schemas import SimilarityResult

__all__ = [
    "SimilarityResult",
    "cosine_distance",
    "cosine_similarity",
    "rank_candidates",
]
