"""
Page text model for the chunking pipeline.

One retrievable unit: the raw text of a single page and its position.

Dependencies: pydantic
System role: Unit of work for per-page embedding and storage
"""

from pydantic import BaseModel, ConfigDict, Field


class PageText(BaseModel):
    """Raw page text with its 1-based page number."""

    model_config = ConfigDict(frozen=True)

    position: int = Field(description="Page number within the document")
    text: str = Field(description="Raw page text as extracted")
