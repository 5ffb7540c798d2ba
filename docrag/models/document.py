"""
Document domain model.

Dependencies: pydantic
System role: Read model for ingested documents
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """An ingested source unit. Immutable once created."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: uuid.UUID = Field(description="Identifier assigned on creation")
    name: str = Field(description="Display name or path of the source file")
    created_at: datetime = Field(description="Creation timestamp (UTC)")
