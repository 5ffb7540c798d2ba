"""
Chunk CRUD operations.

Provides chunk lookups and the pgvector cosine-similarity query used by
the document store.

Dependencies: sqlalchemy, pgvector, docrag.boundary.db.models
System role: Chunk persistence and similarity search
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from docrag.boundary.db.CRUD.base_crud import BaseCRUD
from docrag.boundary.db.models.chunk_model import ChunkModel


class ChunkCRUD(BaseCRUD[ChunkModel]):
    """
    CRUD operations for ChunkModel.

    Extends BaseCRUD with per-document listing and ranked similarity search.
    """

    def __init__(self) -> None:
        """Initialize ChunkCRUD with ChunkModel."""
        super().__init__(ChunkModel)

    async def get_by_document_id(
        self,
        session: AsyncSession,
        document_id: UUID,
    ) -> Sequence[ChunkModel]:
        """
        Retrieve all chunks of a document ordered by position.

        Args:
            session: Async database session
            document_id: Owning document UUID

        Returns:
            Sequence of ChunkModels in page order
        """
        stmt = (
            select(ChunkModel)
            .where(ChunkModel.document_id == document_id)
            .order_by(ChunkModel.position.asc())
        )
        result = await session.execute(stmt)
        return result.scalars().all()

    async def find_similar(
        self,
        session: AsyncSession,
        query_vector: list[float],
        threshold: float,
        limit: int,
    ) -> Sequence[Any]:
        """
        Rank chunks by cosine similarity to a query vector.

        similarity = 1 - (embedding <=> query). Rows must score strictly
        above the threshold; ties are ordered by ascending chunk id.

        Args:
            session: Async database session
            query_vector: Query embedding (already validated)
            threshold: Exclusive lower bound on similarity
            limit: Maximum number of rows

        Returns:
            Rows with id, document_id, position, content, similarity
        """
        similarity = (1 - ChunkModel.embedding.cosine_distance(query_vector)).label("similarity")
        stmt = (
            select(
                ChunkModel.id,
                ChunkModel.document_id,
                ChunkModel.position,
                ChunkModel.content,
                similarity,
            )
            .where(similarity > threshold)
            .order_by(similarity.desc(), ChunkModel.id.asc())
            .limit(limit)
        )
        result = await session.execute(stmt)
        return result.all()


chunk_crud = ChunkCRUD()
