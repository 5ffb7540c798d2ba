"""
Document store contract.

Defines the persistence and similarity-query operations every store
backend implements. Backends validate inputs at this boundary so no
malformed vector or parameter reaches storage.

Dependencies: docrag.models, docrag.boundary.vdb.vector_schemas
System role: Storage abstraction for the retrieval engine
"""

import uuid
from abc import ABC, abstractmethod

from docrag.boundary.vdb.vector_schemas import SimilarityResult
from docrag.models.chunk import Chunk
from docrag.models.document import Document


class DocumentStore(ABC):
    """
    Durable home of documents, chunks and chunk embeddings.

    Attributes:
        dimension: Embedding length D accepted by insert_chunk and query_similar
    """

    def __init__(self, dimension: int) -> None:
        """
        Initialize store with the system-wide embedding dimension.

        Args:
            dimension: Required length of every stored and queried vector
        """
        self.dimension = dimension

    @abstractmethod
    async def create_document(self, name: str) -> Document:
        """
        Allocate a new document with a fresh id and creation timestamp.

        Raises:
            StorageError: Persistence layer unreachable or failing
        """

    @abstractmethod
    async def insert_chunk(
        self,
        document_id: uuid.UUID,
        position: int,
        content: str,
        embedding: list[float],
    ) -> Chunk:
        """
        Store one chunk row atomically: the full row or nothing.

        Raises:
            ValidationError: Wrong embedding length or unknown document_id
            StorageError: Persistence failure, including a duplicate position
        """

    @abstractmethod
    async def query_similar(
        self,
        query_vector: list[float],
        threshold: float,
        limit: int,
    ) -> list[SimilarityResult]:
        """
        Exact top-K chunks with similarity strictly above the threshold.

        Ordered by similarity descending, then chunk id ascending.

        Raises:
            ValidationError: Malformed vector, threshold or limit
            StorageError: Persistence failure
        """

    @abstractmethod
    async def list_chunks(self, document_id: uuid.UUID) -> list[Chunk]:
        """Return the chunks of a document in position order."""

    async def close(self) -> None:
        """Release backend resources. No-op by default."""
        return None
