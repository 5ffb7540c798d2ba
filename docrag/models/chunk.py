"""
Chunk domain model.

Represents one page of a document with its embedding vector.

Dependencies: pydantic
System role: Read model for stored chunks
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """One retrievable unit of text belonging to exactly one document."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: uuid.UUID = Field(description="Chunk identifier")
    document_id: uuid.UUID = Field(description="Owning document identifier")
    position: int = Field(description="Page number within the document")
    content: str = Field(description="Raw page text")
    embedding: list[float] = Field(description="Embedding vector of length D", repr=False)
