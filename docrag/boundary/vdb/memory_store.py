"""
In-memory document store for development and tests.

Exact linear scan with numpy; same contract and ranking as the pgvector
store. Data lives for the lifetime of the process only.

Dependencies: numpy, docrag.boundary.vdb
System role: Development document store (local testing only)
"""

import logging
import uuid
from datetime import datetime, timezone

import numpy as np

from docrag.boundary.vdb.document_store import DocumentStore
from docrag.boundary.vdb.similarity import rank_candidates
from docrag.boundary.vdb.vector_schemas import SimilarityResult
from docrag.core.exceptions import StorageError, ValidationError
from docrag.core.validation import validate_embedding, validate_search_params
from docrag.models.chunk import Chunk
from docrag.models.document import Document

logger = logging.getLogger(__name__)


class InMemoryDocumentStore(DocumentStore):
    """
    Dictionary-backed store.

    Inserts contain no await points, so each one is atomic with respect
    to other tasks on the event loop.
    """

    def __init__(self, dimension: int) -> None:
        super().__init__(dimension)
        self._documents: dict[uuid.UUID, Document] = {}
        self._chunks: dict[uuid.UUID, Chunk] = {}
        self._positions: set[tuple[uuid.UUID, int]] = set()

    async def create_document(self, name: str) -> Document:
        document = Document(
            id=uuid.uuid4(),
            name=name,
            created_at=datetime.now(timezone.utc),
        )
        self._documents[document.id] = document
        logger.debug(f"{__name__}:create_document - id={document.id} name={name}")
        return document

    async def insert_chunk(
        self,
        document_id: uuid.UUID,
        position: int,
        content: str,
        embedding: list[float],
    ) -> Chunk:
        validate_embedding(embedding, self.dimension)
        if document_id not in self._documents:
            raise ValidationError(
                f"Document not found: {document_id}",
                field="document_id",
            )
        if (document_id, position) in self._positions:
            raise StorageError(
                f"Chunk already stored for position {position}",
                operation="insert_chunk",
                details={"document_id": str(document_id), "position": position},
            )

        chunk = Chunk(
            id=uuid.uuid4(),
            document_id=document_id,
            position=position,
            content=content,
            embedding=[float(value) for value in embedding],
        )
        self._chunks[chunk.id] = chunk
        self._positions.add((document_id, position))
        return chunk

    async def query_similar(
        self,
        query_vector: list[float],
        threshold: float,
        limit: int,
    ) -> list[SimilarityResult]:
        validate_embedding(query_vector, self.dimension, field="query_vector")
        validate_search_params(threshold, limit)

        if not self._chunks:
            return []

        chunks = list(self._chunks.values())
        matrix = np.asarray([chunk.embedding for chunk in chunks], dtype=np.float64)
        query = np.asarray(query_vector, dtype=np.float64)

        norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(query)
        with np.errstate(divide="ignore", invalid="ignore"):
            similarities = (matrix @ query) / norms

        ranked = rank_candidates(
            ((chunk.id, float(score)) for chunk, score in zip(chunks, similarities)),
            threshold,
            limit,
        )
        return [
            SimilarityResult(
                chunk_id=chunk_id,
                document_id=self._chunks[chunk_id].document_id,
                position=self._chunks[chunk_id].position,
                content=self._chunks[chunk_id].content,
                similarity=score,
            )
            for chunk_id, score in ranked
        ]

    async def list_chunks(self, document_id: uuid.UUID) -> list[Chunk]:
        chunks = [chunk for chunk in self._chunks.values() if chunk.document_id == document_id]
        return sorted(chunks, key=lambda chunk: chunk.position)
