"""
Domain models.

Exports: Document, Chunk, StreamEvent, StreamEventType, ComposedAnswer
"""

from docrag.models.answer import ComposedAnswer
from docrag.models.chunk import Chunk
from docrag.models.document import Document
from docrag.models.streaming import StreamEvent, StreamEventType

__all__ = ["Document", "Chunk", "StreamEvent", "StreamEventType", "ComposedAnswer"]
