"""
Application services.

Exports: DocumentService, SearchService, ChatService
"""

from docrag.application.services.chat_service import ChatService
from docrag.application.services.document_service import DocumentService
from docrag.application.services.search_service import SearchService

__all__ = ["DocumentService", "SearchService", "ChatService"]
