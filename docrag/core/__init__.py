"""
Core business logic module.

Contains the exception hierarchy, input validation, the similarity
retriever, the chunking pipeline and the answer composer.
"""

from docrag.core.exceptions import (
    DocRagException,
    ExportError,
    ParsingError,
    ProviderError,
    StorageError,
    ValidationError,
)

__all__ = [
    "DocRagException",
    "ValidationError",
    "ProviderError",
    "StorageError",
    "ParsingError",
    "ExportError",
]
