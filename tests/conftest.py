"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory and SQLite-backed stores, fake embedding providers,
          chat model doubles
Dependencies: pytest, sqlalchemy, aiosqlite, langchain_core
System role: Test infrastructure and fixture management
"""

import uuid

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding

from docrag.boundary.llm.embedding_provider import EmbeddingProvider
from docrag.boundary.vdb.memory_store import InMemoryDocumentStore
from docrag.boundary.vdb.vector_schemas import SimilarityResult

TEST_DIMENSION = 64


class FlakyEmbeddings(DeterministicFakeEmbedding):
    """Deterministic fake that fails for texts containing ``failing_text``."""

    failing_text: str = "unreachable page"

    async def aembed_query(self, text: str) -> list[float]:
        if self.failing_text in text:
            raise RuntimeError("rate limited")
        return self.embed_query(text)


@pytest.fixture
def make_result():
    """Provide factory building similarity results with fresh ids."""

    def _make(content: str = "chunk text", similarity: float = 0.9, position: int = 1) -> SimilarityResult:
        return SimilarityResult(
            chunk_id=uuid.uuid4(),
            document_id=uuid.uuid4(),
            position=position,
            content=content,
            similarity=similarity,
        )

    return _make


@pytest.fixture
def fake_embeddings() -> DeterministicFakeEmbedding:
    """Provide deterministic fake embeddings (identical text -> identical vector)."""
    return DeterministicFakeEmbedding(size=TEST_DIMENSION)


@pytest.fixture
def embedder(fake_embeddings: DeterministicFakeEmbedding) -> EmbeddingProvider:
    """Provide embedding provider over the fake embeddings with no retries."""
    return EmbeddingProvider(
        embeddings=fake_embeddings,
        dimension=TEST_DIMENSION,
        timeout_seconds=5.0,
        max_attempts=1,
    )


@pytest.fixture
def flaky_embedder() -> EmbeddingProvider:
    """Provide embedding provider that fails for 'unreachable page' text."""
    return EmbeddingProvider(
        embeddings=FlakyEmbeddings(size=TEST_DIMENSION),
        dimension=TEST_DIMENSION,
        timeout_seconds=5.0,
        max_attempts=1,
    )


@pytest.fixture
def memory_store() -> InMemoryDocumentStore:
    """Provide empty in-memory store with the test dimension."""
    return InMemoryDocumentStore(dimension=TEST_DIMENSION)


@pytest.fixture
async def sqlite_engine():
    """
    Create in-memory SQLite async engine with the docrag schema.

    Yields:
        AsyncEngine: Engine bound to a single shared in-memory connection
    """
    from sqlalchemy.ext.asyncio import create_async_engine
    from sqlalchemy.pool import StaticPool

    from docrag.boundary.db.base import Base
    import docrag.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def sqlite_session_factory(sqlite_engine):
    """Provide session factory bound to the SQLite engine."""
    from docrag.boundary.db.connection import get_async_session_factory

    return get_async_session_factory(sqlite_engine)
