"""
Document parsing task using LangChain PyPDFLoader.

Converts a PDF file into page texts keyed by 1-based page number.

Dependencies: langchain_community.document_loaders
System role: First stage of document ingestion pipeline
"""

import logging
from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader

from docrag.core.exceptions import ParsingError

logger = logging.getLogger(__name__)


class PdfPageLoader:
    """Load PDF documents as page number -> text."""

    def load(self, file_path: str | Path) -> dict[int, str]:
        """
        Parse a PDF into page texts.

        Args:
            file_path: Path to PDF document

        Returns:
            dict[int, str]: 1-based page number -> extracted text

        Raises:
            ParsingError: File missing, not a PDF, unreadable or without pages
        """
        path = Path(file_path)
        if not path.is_file():
            raise ParsingError(f"File not found: {file_path}", file_path=str(file_path))

        if path.suffix.lower() != ".pdf":
            raise ParsingError(
                f"Unsupported file format: {path.suffix or '(none)'}. Only PDF files are supported.",
                file_path=str(file_path),
            )

        try:
            documents = PyPDFLoader(str(path)).load()
        except Exception as e:
            raise ParsingError(f"Failed to parse PDF: {e}", file_path=str(file_path)) from e

        if not documents:
            raise ParsingError("PDF document contains no pages", file_path=str(file_path))

        pages: dict[int, str] = {}
        for index, document in enumerate(documents):
            page_number = int(document.metadata.get("page", index)) + 1
            pages[page_number] = document.page_content

        logger.info(f"{__name__}:load - Parsed {len(pages)} pages from {path.name}")
        return pages
