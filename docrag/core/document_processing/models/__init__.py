"""
Models for document processing pipeline.

Exports: PageText, PageFailure, IngestionResult
"""

from .page_text import PageText
from .pipeline_result import IngestionResult, PageFailure

__all__ = [
    "PageText",
    "PageFailure",
    "IngestionResult",
]
