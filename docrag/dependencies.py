"""
Dependency injection container.

Factory functions wiring stores, providers and services from settings.

Dependencies: docrag.configs, docrag.application, docrag.boundary, docrag.core
System role: DI container for service construction
"""

from docrag.application.services import ChatService, DocumentService, SearchService
from docrag.boundary.llm import get_chat_model, get_embedding_provider
from docrag.boundary.llm.embedding_provider import EmbeddingProvider
from docrag.boundary.vdb.document_store import DocumentStore
from docrag.boundary.vdb.store_factory import get_document_store
from docrag.configs import Settings, get_settings
from docrag.core.document_processing import IngestionPipeline
from docrag.core.rag_query import AnswerComposer
from docrag.core.retriever import SimilarityRetriever


def get_retriever(store: DocumentStore, embedder: EmbeddingProvider) -> SimilarityRetriever:
    """Get similarity retriever over the given store."""
    return SimilarityRetriever(store=store, embedder=embedder)


def get_document_service(
    store: DocumentStore,
    embedder: EmbeddingProvider | None = None,
    settings: Settings | None = None,
) -> DocumentService:
    """
    Get document service instance.

    Args:
        store: Document store
        embedder: Embedding provider (built from settings if None)
        settings: Application settings (cached settings if None)

    Returns:
        DocumentService: Document service instance
    """
    settings = settings or get_settings()
    pipeline = IngestionPipeline(
        store=store,
        embedder=embedder or get_embedding_provider(settings),
        concurrency=settings.retrieval.ingest_concurrency,
    )
    return DocumentService(store=store, pipeline=pipeline)


def get_search_service(
    store: DocumentStore,
    embedder: EmbeddingProvider | None = None,
    settings: Settings | None = None,
) -> SearchService:
    """Get search service instance with configured defaults."""
    settings = settings or get_settings()
    return SearchService(
        retriever=get_retriever(store, embedder or get_embedding_provider(settings)),
        default_threshold=settings.retrieval.similarity_threshold,
        default_limit=settings.retrieval.limit,
    )


def get_chat_service(
    store: DocumentStore,
    embedder: EmbeddingProvider | None = None,
    settings: Settings | None = None,
) -> ChatService:
    """
    Get chat service instance.

    Args:
        store: Document store
        embedder: Embedding provider (built from settings if None)
        settings: Application settings (cached settings if None)

    Returns:
        ChatService: Chat service instance
    """
    settings = settings or get_settings()
    composer = AnswerComposer(
        retriever=get_retriever(store, embedder or get_embedding_provider(settings)),
        model=get_chat_model(settings),
        default_threshold=settings.retrieval.similarity_threshold,
        default_limit=settings.retrieval.limit,
        fragment_timeout_seconds=settings.generation.timeout_seconds,
    )
    return ChatService(composer=composer)


__all__ = [
    "get_document_store",
    "get_retriever",
    "get_document_service",
    "get_search_service",
    "get_chat_service",
]
