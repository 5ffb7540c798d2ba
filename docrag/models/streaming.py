"""
Streaming event schemas for answer generation.

Defines event types and payloads emitted while an answer is composed.

Dependencies: pydantic
System role: Streaming protocol schemas
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel


class StreamEventType(str, Enum):
    """Event types emitted by the answer composer."""

    CONTEXT = "context"
    TOKEN = "token"
    COMPLETE = "complete"


class StreamEvent(BaseModel):
    """
    Base streaming event model.

    Attributes:
        event: Event type identifier
        data: Event-specific payload
    """

    event: StreamEventType
    data: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        data = {
            key: value.model_dump(mode="json") if isinstance(value, BaseModel) else value
            for key, value in self.data.items()
        }
        return {"event": self.event.value, "data": data}
