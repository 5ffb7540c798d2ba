"""
ORM models package.

Exports: DocumentModel, ChunkModel
"""

from docrag.boundary.db.models.chunk_model import ChunkModel
from docrag.boundary.db.models.document_model import DocumentModel

__all__ = ["DocumentModel", "ChunkModel"]
