"""
Embedding provider client.

Turns text into a vector of length D through a LangChain Embeddings
implementation. Transient failures are retried with exponential jitter
backoff; whatever still fails surfaces as ProviderError.

Dependencies: langchain_core, tenacity, docrag.configs
System role: Leaf dependency of ingestion and retrieval
"""

import asyncio
import logging

from langchain_core.embeddings import Embeddings
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from docrag.configs import Settings, get_settings
from docrag.core.exceptions import ProviderError

logger = logging.getLogger(__name__)


class EmbeddingProvider:
    """
    Async embedding client with retry, deadline and dimension check.

    Attributes:
        dimension: Length D every returned vector must have
    """

    def __init__(
        self,
        embeddings: Embeddings,
        dimension: int,
        timeout_seconds: float | None = 30.0,
        max_attempts: int = 3,
        backoff_initial: float = 1.0,
        backoff_max: float = 20.0,
    ) -> None:
        """
        Initialize provider.

        Args:
            embeddings: LangChain embeddings model
            dimension: Required vector length D
            timeout_seconds: Deadline per attempt (None for no deadline)
            max_attempts: Attempts before the failure is surfaced
            backoff_initial: First retry wait in seconds
            backoff_max: Upper bound on a single retry wait
        """
        self._embeddings = embeddings
        self.dimension = dimension
        self._timeout = timeout_seconds
        self._max_attempts = max_attempts
        self._backoff_initial = backoff_initial
        self._backoff_max = backoff_max

    async def _embed_once(self, text: str) -> list[float]:
        return await asyncio.wait_for(
            self._embeddings.aembed_query(text),
            timeout=self._timeout,
        )

    async def embed(self, text: str) -> list[float]:
        """
        Embed one text.

        Newlines are replaced by spaces before submission.

        Args:
            text: Text to embed

        Returns:
            Vector of length D

        Raises:
            ProviderError: Timeout, provider failure or wrong-length response
        """
        normalized = text.replace("\n", " ")

        retrying = AsyncRetrying(
            retry=retry_if_exception_type(Exception),
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential_jitter(initial=self._backoff_initial, max=self._backoff_max),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:embed - Retry {retry_state.attempt_number}/{self._max_attempts} "
                f"after {type(retry_state.outcome.exception()).__name__}"
            ),
            reraise=True,
        )

        try:
            vector = await retrying(self._embed_once, normalized)
        except asyncio.TimeoutError as e:
            raise ProviderError(
                f"Embedding request exceeded {self._timeout}s",
                provider="embedding",
            ) from e
        except Exception as e:
            raise ProviderError(
                f"Embedding request failed: {type(e).__name__}: {e}",
                provider="embedding",
            ) from e

        if vector is None or len(vector) != self.dimension:
            raise ProviderError(
                f"Malformed embedding response: expected {self.dimension} dimensions, got {len(vector or [])}",
                provider="embedding",
                details={"expected": self.dimension, "actual": len(vector or [])},
            )
        return [float(value) for value in vector]


def get_embedding_provider(settings: Settings | None = None) -> EmbeddingProvider:
    """
    Build the Google Gemini embedding provider from configuration.

    Args:
        settings: Application settings (cached settings if None)

    Returns:
        EmbeddingProvider backed by FixedDimensionEmbeddings
    """
    from docrag.boundary.llm.embeddings_wrapper import FixedDimensionEmbeddings

    settings = settings or get_settings()
    config = settings.embedding
    embeddings = FixedDimensionEmbeddings(
        model=config.model,
        output_dimensionality=config.dimension,
    )
    return EmbeddingProvider(
        embeddings=embeddings,
        dimension=config.dimension,
        timeout_seconds=config.timeout_seconds,
        max_attempts=config.max_attempts,
    )
