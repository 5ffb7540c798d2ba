"""
Ingestion result model for document processing.

Represents the outcome of running a document's pages through the
chunking pipeline, page by page.

Dependencies: pydantic
System role: Return type for IngestionPipeline.run()
"""

import uuid

from pydantic import BaseModel, Field


class PageFailure(BaseModel):
    """A page whose embedding or storage failed."""

    position: int = Field(description="Page number that failed")
    error_type: str = Field(description="Exception class name")
    message: str = Field(description="Failure cause")


class IngestionResult(BaseModel):
    """Aggregate result of chunking pipeline execution."""

    document_id: uuid.UUID = Field(description="Document the chunks belong to")
    stored_chunks: int = Field(default=0, description="Number of chunks stored")
    failed_pages: list[PageFailure] = Field(
        default_factory=list,
        description="Failed pages in position order",
    )
    skipped_positions: list[int] = Field(
        default_factory=list,
        description="Pages skipped because they held no text",
    )
    processing_time_ms: float = Field(default=0.0, description="Total processing time in milliseconds")

    @property
    def failed_positions(self) -> list[int]:
        return [failure.position for failure in self.failed_pages]

    @property
    def is_failure(self) -> bool:
        """Ingestion failed overall only when no page was stored."""
        return self.stored_chunks == 0

    @property
    def is_partial(self) -> bool:
        return self.stored_chunks > 0 and bool(self.failed_pages)
