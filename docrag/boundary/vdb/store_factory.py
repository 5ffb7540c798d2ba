"""
Document store factory for selecting between in-memory (dev) and pgvector (prod).

Depends on RETRIEVAL_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: docrag.boundary.vdb, docrag.boundary.db, docrag.configs
System role: Document store instantiation and selection
"""

import logging

from docrag.boundary.vdb.document_store import DocumentStore
from docrag.configs import Settings, get_settings

logger = logging.getLogger(__name__)


def get_document_store(settings: Settings | None = None) -> DocumentStore:
    """
    Factory function to get a document store based on configuration.

    Args:
        settings: Application settings (cached settings if None)

    Returns:
        PgVectorDocumentStore or InMemoryDocumentStore

    Raises:
        ValueError: If RETRIEVAL_STORE_TYPE is invalid
    """
    settings = settings or get_settings()
    store_type = settings.retrieval.store_type.lower()
    dimension = settings.embedding.dimension

    if store_type == "memory":
        from docrag.boundary.vdb.memory_store import InMemoryDocumentStore

        logger.info(f"{__name__}:get_document_store - Creating in-memory store (local dev mode)")
        return InMemoryDocumentStore(dimension=dimension)

    elif store_type == "postgres":
        from docrag.boundary.db.connection import get_async_engine, get_async_session_factory
        from docrag.boundary.vdb.pgvector_store import PgVectorDocumentStore

        logger.info(f"{__name__}:get_document_store - Creating pgvector store (production mode)")
        engine = get_async_engine()
        return PgVectorDocumentStore(
            session_factory=get_async_session_factory(engine),
            dimension=dimension,
            timeout_seconds=settings.database.query_timeout,
            engine=engine,
        )

    else:
        raise ValueError(
            f"Invalid RETRIEVAL_STORE_TYPE: {store_type}. "
            f"Must be 'memory' (dev) or 'postgres' (production)."
        )
