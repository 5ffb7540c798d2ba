"""
Chunk ORM model.

One retrievable unit of document text (one page) with its embedding.
The embedding column is a pgvector ``vector(D)`` with an HNSW cosine
index; D comes from the embedding settings.

Dependencies: sqlalchemy, pgvector, docrag.boundary.db.base, docrag.configs
System role: Chunk and embedding persistence for similarity search
"""

import uuid

from pgvector.sqlalchemy import Vector
from sqlalchemy import ForeignKey, Index, Integer, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from docrag.boundary.db.base import Base, CreatedAtMixin, UUIDMixin
from docrag.configs import get_settings

EMBEDDING_DIMENSION = get_settings().embedding.dimension


class ChunkModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Chunk ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        document_id: Owning document (ON DELETE CASCADE)
        position: Page number establishing order within the document
        content: Raw page text as extracted
        embedding: Vector of length EMBEDDING_DIMENSION
        created_at: Insert timestamp (UTC)

    Constraints:
        uq_chunks_document_position: one chunk per (document, position)
        ix_chunks_embedding_hnsw: HNSW index using vector_cosine_ops
    """

    __tablename__ = "chunks"

    document_id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("documents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    position: Mapped[int] = mapped_column(Integer, nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    embedding: Mapped[list[float]] = mapped_column(
        Vector(EMBEDDING_DIMENSION),
        nullable=False,
    )

    document = relationship("DocumentModel", back_populates="chunks")

    __table_args__ = (
        UniqueConstraint("document_id", "position", name="uq_chunks_document_position"),
        Index(
            "ix_chunks_embedding_hnsw",
            "embedding",
            postgresql_using="hnsw",
            postgresql_with={"m": 16, "ef_construction": 64},
            postgresql_ops={"embedding": "vector_cosine_ops"},
        ),
    )
