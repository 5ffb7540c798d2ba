"""
Model provider boundary layer.

Exports: EmbeddingProvider, get_embedding_provider, get_chat_model
"""

from docrag.boundary.llm.chat_model import get_chat_model
from docrag.boundary.llm.embedding_provider import EmbeddingProvider, get_embedding_provider

__all__ = ["EmbeddingProvider", "get_embedding_provider", "get_chat_model"]
