"""
Document service orchestrator.

Coordinates file loading: parse PDF -> create document -> chunking pipeline.

Dependencies: docrag.boundary.vdb, docrag.core.document_processing
System role: Document ingestion orchestration
"""

import logging
from pathlib import Path

from docrag.boundary.vdb.document_store import DocumentStore
from docrag.core.document_processing.entrypoint import IngestionPipeline
from docrag.core.document_processing.models import IngestionResult
from docrag.core.document_processing.tasks import PdfPageLoader
from docrag.models.document import Document

logger = logging.getLogger(__name__)


class DocumentService:
    """
    Document service orchestrator.

    Parsing happens before any row is written, so a file that cannot be
    parsed leaves no document behind.
    """

    def __init__(
        self,
        store: DocumentStore,
        pipeline: IngestionPipeline,
        loader: PdfPageLoader | None = None,
    ) -> None:
        """
        Initialize document service.

        Args:
            store: Document store for the document row
            pipeline: Chunking pipeline for the pages
            loader: PDF page loader (created if None)
        """
        self._store = store
        self._pipeline = pipeline
        self._loader = loader or PdfPageLoader()

    async def load_file(self, path: str | Path) -> tuple[Document, IngestionResult]:
        """
        Ingest a PDF file.

        Args:
            path: Path to the PDF

        Returns:
            tuple: (created document, ingestion result)

        Raises:
            ParsingError: File missing, not a PDF or unreadable
            StorageError: Document row could not be created
        """
        pages = self._loader.load(path)
        document = await self._store.create_document(str(path))
        logger.info(
            f"{__name__}:load_file - Created document id={document.id} pages={len(pages)}"
        )
        result = await self._pipeline.run(document.id, pages)
        return document, result
