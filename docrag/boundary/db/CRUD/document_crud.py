"""
Document CRUD operations.

Dependencies: sqlalchemy, docrag.boundary.db.models
System role: Document persistence operations
"""

from docrag.boundary.db.CRUD.base_crud import BaseCRUD
from docrag.boundary.db.models.document_model import DocumentModel


class DocumentCRUD(BaseCRUD[DocumentModel]):
    """CRUD operations for DocumentModel. Documents are insert-only."""

    def __init__(self) -> None:
        """Initialize DocumentCRUD with DocumentModel."""
        super().__init__(DocumentModel)


document_crud = DocumentCRUD()
