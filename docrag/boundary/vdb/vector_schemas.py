"""
Vector search schemas.

Pydantic model for ranked similarity results.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

import uuid

from pydantic import BaseModel, Field


class SimilarityResult(BaseModel):
    """
    Single ranked chunk from a similarity search.

    Transient: exists only for the duration of one retrieval and the
    answer built from it.
    """

    chunk_id: uuid.UUID = Field(description="Chunk identifier")
    document_id: uuid.UUID = Field(description="Owning document identifier")
    position: int = Field(description="Page number in the source document")
    content: str = Field(description="Chunk text content")
    similarity: float = Field(description="1 - cosine distance to the query")
