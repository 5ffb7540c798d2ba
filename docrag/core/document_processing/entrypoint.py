"""
Chunking pipeline orchestrator.

Embeds and stores every page of a document concurrently. Each page is an
independent task: one page's failure is recorded and never cancels or
blocks another, and pages already stored are kept.

Dependencies: docrag.boundary.llm, docrag.boundary.vdb, asyncio
System role: Pipeline orchestration (coordinates only)
"""

import asyncio
import logging
import time
import uuid
from collections.abc import Mapping

from docrag.boundary.llm.embedding_provider import EmbeddingProvider
from docrag.boundary.vdb.document_store import DocumentStore
from docrag.observability.log_utils import log_exception_with_context

from .models import IngestionResult, PageFailure, PageText
from .tasks import ChunkingTask

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Orchestrate page ingestion: chunk -> (embed -> store) per page."""

    def __init__(
        self,
        store: DocumentStore,
        embedder: EmbeddingProvider,
        concurrency: int = 8,
    ) -> None:
        """
        Initialize pipeline.

        Args:
            store: Document store receiving the chunks
            embedder: Embedding provider for page text
            concurrency: Maximum pages in flight at once
        """
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")

        self._store = store
        self._embedder = embedder
        self._concurrency = concurrency
        self._chunking_task = ChunkingTask()

    async def run(
        self,
        document_id: uuid.UUID,
        pages: Mapping[int, str],
    ) -> IngestionResult:
        """
        Embed and store every non-empty page of an existing document.

        Args:
            document_id: Document the chunks belong to
            pages: Page number -> raw text

        Returns:
            IngestionResult: Stored count, failed pages and skipped positions
        """
        start_time = time.perf_counter()
        units, skipped = self._chunking_task.chunk(pages)

        if skipped:
            logger.info(f"{__name__}:run - Skipping empty pages {skipped}")

        semaphore = asyncio.Semaphore(self._concurrency)
        outcomes = await asyncio.gather(
            *(self._process_page(semaphore, document_id, unit) for unit in units)
        )

        failures = sorted(
            (outcome for outcome in outcomes if outcome is not None),
            key=lambda failure: failure.position,
        )
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        result = IngestionResult(
            document_id=document_id,
            stored_chunks=len(units) - len(failures),
            failed_pages=failures,
            skipped_positions=skipped,
            processing_time_ms=elapsed_ms,
        )
        logger.info(
            f"{__name__}:run - document_id={document_id} stored={result.stored_chunks} "
            f"failed={len(failures)} skipped={len(skipped)} in {elapsed_ms:.0f}ms"
        )
        return result

    async def _process_page(
        self,
        semaphore: asyncio.Semaphore,
        document_id: uuid.UUID,
        unit: PageText,
    ) -> PageFailure | None:
        """Embed then store one page; return its failure instead of raising."""
        async with semaphore:
            try:
                embedding = await self._embedder.embed(unit.text)
                await self._store.insert_chunk(document_id, unit.position, unit.text, embedding)
            except Exception as e:
                log_exception_with_context(
                    logger,
                    f"{__name__}:_process_page - Page {unit.position} failed",
                    e,
                    document_id=document_id,
                    page=unit.position,
                )
                return PageFailure(
                    position=unit.position,
                    error_type=type(e).__name__,
                    message=getattr(e, "message", str(e)),
                )
        return None
