"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Async connection management
  - DocumentModel, ChunkModel: Persisted entities
  - document_crud, chunk_crud: CRUD operation singletons

Dependencies: sqlalchemy, pgvector, docrag.configs
System role: Database adapter for documents, chunks and their embeddings
"""

from docrag.boundary.db.base import Base, CreatedAtMixin, UUIDMixin
from docrag.boundary.db.connection import get_async_engine, get_async_session_factory
from docrag.boundary.db.models import ChunkModel, DocumentModel
from docrag.boundary.db.CRUD import (
    BaseCRUD,
    ChunkCRUD,
    DocumentCRUD,
    chunk_crud,
    document_crud,
)

__all__ = [
    "Base",
    "CreatedAtMixin",
    "UUIDMixin",
    "get_async_engine",
    "get_async_session_factory",
    "DocumentModel",
    "ChunkModel",
    "BaseCRUD",
    "DocumentCRUD",
    "ChunkCRUD",
    "document_crud",
    "chunk_crud",
]
