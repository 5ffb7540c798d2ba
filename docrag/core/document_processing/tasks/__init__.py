"""
Task modules for document processing pipeline.

Exports: PdfPageLoader, ChunkingTask
"""

from .chunking_task import ChunkingTask
from .parsing_task import PdfPageLoader

__all__ = [
    "PdfPageLoader",
    "ChunkingTask",
]
