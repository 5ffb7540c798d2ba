"""
Document ORM model.

Represents one ingested source file. Rows are created once per ingestion
call and never updated.

Dependencies: sqlalchemy, docrag.boundary.db.base
System role: Document persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from docrag.boundary.db.base import Base, CreatedAtMixin, UUIDMixin


class DocumentModel(Base, UUIDMixin, CreatedAtMixin):
    """
    Document ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        name: Display name or path of the source file (1024 char limit)
        created_at: Ingestion timestamp (UTC)

    Relationships:
        chunks: ChunkModel rows belonging to this document
    """

    __tablename__ = "documents"

    name: Mapped[str] = mapped_column(
        String(1024),
        nullable=False,
        doc="Source file name or path",
    )

    chunks = relationship(
        "ChunkModel",
        back_populates="document",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
