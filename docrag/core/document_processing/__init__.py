"""
Document processing pipeline for ingestion.

Parses PDFs into pages and embeds and stores each page as one chunk.

Dependencies: langchain_community, docrag.boundary, pydantic
System role: Document ingestion pipeline entrypoint
"""

from .entrypoint import IngestionPipeline
from .models import IngestionResult, PageFailure, PageText
from .tasks import ChunkingTask, PdfPageLoader

__all__ = [
    "IngestionPipeline",
    "IngestionResult",
    "PageFailure",
    "PageText",
    "ChunkingTask",
    "PdfPageLoader",
]
