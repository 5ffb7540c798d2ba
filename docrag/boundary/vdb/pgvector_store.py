"""
PostgreSQL + pgvector document store.

Persists documents and chunks through SQLAlchemy async sessions and
delegates similarity ranking to pgvector's cosine distance operator.
Each operation runs in its own session and transaction, so concurrent
page tasks never share a session.

Dependencies: sqlalchemy, pgvector, docrag.boundary.db, docrag.boundary.vdb
System role: Production document store
"""

import asyncio
import logging
import uuid
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from docrag.boundary.db.CRUD.chunk_crud import chunk_crud
from docrag.boundary.db.CRUD.document_crud import document_crud
from docrag.boundary.db.models.chunk_model import ChunkModel
from docrag.boundary.vdb.document_store import DocumentStore
from docrag.boundary.vdb.vector_schemas import SimilarityResult
from docrag.core.exceptions import StorageError, ValidationError
from docrag.core.validation import validate_embedding, validate_search_params
from docrag.models.chunk import Chunk
from docrag.models.document import Document

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _to_chunk(model: ChunkModel) -> Chunk:
    """Convert an ORM row (pgvector returns numpy arrays) to the domain model."""
    return Chunk(
        id=model.id,
        document_id=model.document_id,
        position=model.position,
        content=model.content,
        embedding=[float(value) for value in model.embedding],
    )


class PgVectorDocumentStore(DocumentStore):
    """
    Document store backed by PostgreSQL with the pgvector extension.

    Storage errors are surfaced immediately; retry policy, if any,
    belongs to the connection pool.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        dimension: int,
        timeout_seconds: float | None = None,
        engine: AsyncEngine | None = None,
    ) -> None:
        """
        Initialize store.

        Args:
            session_factory: Factory producing a fresh AsyncSession per operation
            dimension: Embedding length D (must match the vector column)
            timeout_seconds: Deadline per storage operation (None for no deadline)
            engine: Engine to dispose on close(), when this store owns it
        """
        super().__init__(dimension)
        self._session_factory = session_factory
        self._timeout = timeout_seconds
        self._engine = engine

    async def _run(
        self,
        operation: str,
        work: Callable[[AsyncSession], Awaitable[T]],
    ) -> T:
        """Run ``work`` in one transaction, mapping driver failures to StorageError."""

        async def _in_transaction() -> T:
            async with self._session_factory() as session, session.begin():
                return await work(session)

        try:
            return await asyncio.wait_for(_in_transaction(), timeout=self._timeout)
        except IntegrityError as e:
            raise StorageError(
                "Integrity constraint violated",
                operation=operation,
                details={"error": str(e.orig)},
            ) from e
        except asyncio.TimeoutError as e:
            raise StorageError(
                f"Storage operation exceeded {self._timeout}s",
                operation=operation,
            ) from e
        except (SQLAlchemyError, OSError) as e:
            raise StorageError(
                f"Storage operation failed: {type(e).__name__}",
                operation=operation,
                details={"error": str(e)},
            ) from e

    async def create_document(self, name: str) -> Document:
        async def _create(session: AsyncSession) -> Document:
            model = await document_crud.create(session, name=name)
            return Document.model_validate(model)

        document = await self._run("create_document", _create)
        logger.info(f"{__name__}:create_document - Stored document id={document.id}")
        return document

    async def insert_chunk(
        self,
        document_id: uuid.UUID,
        position: int,
        content: str,
        embedding: list[float],
    ) -> Chunk:
        validate_embedding(embedding, self.dimension)

        async def _insert(session: AsyncSession) -> Chunk:
            if not await document_crud.exists(session, document_id):
                raise ValidationError(
                    f"Document not found: {document_id}",
                    field="document_id",
                )
            model = await chunk_crud.create(
                session,
                document_id=document_id,
                position=position,
                content=content,
                embedding=embedding,
            )
            return Chunk(
                id=model.id,
                document_id=document_id,
                position=position,
                content=content,
                embedding=[float(value) for value in embedding],
            )

        return await self._run("insert_chunk", _insert)

    async def query_similar(
        self,
        query_vector: list[float],
        threshold: float,
        limit: int,
    ) -> list[SimilarityResult]:
        validate_embedding(query_vector, self.dimension, field="query_vector")
        validate_search_params(threshold, limit)

        async def _query(session: AsyncSession) -> list[SimilarityResult]:
            rows = await chunk_crud.find_similar(session, query_vector, threshold, limit)
            return [
                SimilarityResult(
                    chunk_id=row.id,
                    document_id=row.document_id,
                    position=row.position,
                    content=row.content,
                    similarity=float(row.similarity),
                )
                for row in rows
            ]

        return await self._run("query_similar", _query)

    async def list_chunks(self, document_id: uuid.UUID) -> list[Chunk]:
        async def _list(session: AsyncSession) -> list[Chunk]:
            models = await chunk_crud.get_by_document_id(session, document_id)
            return [_to_chunk(model) for model in models]

        return await self._run("list_chunks", _list)

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
