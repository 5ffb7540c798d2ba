"""
Answer composer.

Retrieves grounding context for a question, streams the chat model's
answer fragment by fragment and finishes with the assembled answer.

Dependencies: langchain_core, docrag.core.retriever
System role: RAG answer orchestration
"""

import asyncio
import logging
from collections.abc import AsyncGenerator, AsyncIterator

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessageChunk

from docrag.core.exceptions import ProviderError
from docrag.core.rag_query.context_prompt import build_messages
from docrag.core.retriever import SimilarityRetriever
from docrag.core.validation import validate_query_text, validate_search_params
from docrag.models.answer import ComposedAnswer
from docrag.models.streaming import StreamEvent, StreamEventType

logger = logging.getLogger(__name__)


def _fragment_text(chunk: BaseMessageChunk) -> str:
    """Flatten string or content-block message content to text."""
    content = chunk.content
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content)


class AnswerComposer:
    """
    Grounded answer generation with streaming.

    Zero qualifying chunks is not an error: the question is then sent
    to the model without context.
    """

    def __init__(
        self,
        retriever: SimilarityRetriever,
        model: BaseChatModel,
        default_threshold: float = 0.78,
        default_limit: int = 5,
        fragment_timeout_seconds: float | None = 60.0,
    ) -> None:
        """
        Initialize composer.

        Args:
            retriever: Similarity retriever for grounding context
            model: Streaming chat model
            default_threshold: Threshold used when the caller gives none
            default_limit: Limit used when the caller gives none
            fragment_timeout_seconds: Deadline for each streamed fragment
        """
        self._retriever = retriever
        self._model = model
        self._default_threshold = default_threshold
        self._default_limit = default_limit
        self._fragment_timeout = fragment_timeout_seconds

    async def astream(
        self,
        query: str,
        threshold: float | None = None,
        limit: int | None = None,
    ) -> AsyncGenerator[StreamEvent, None]:
        """
        Stream a grounded answer.

        Args:
            query: User question
            threshold: Minimum similarity (configured default if None)
            limit: Maximum context chunks (configured default if None)

        Yields:
            StreamEvent: One CONTEXT, then TOKEN per fragment, then COMPLETE

        Raises:
            ValidationError: Blank query, threshold or limit out of range
            ProviderError: Embedding or generation failed
            StorageError: Retrieval failed
        """
        threshold = self._default_threshold if threshold is None else threshold
        limit = self._default_limit if limit is None else limit
        validate_query_text(query)
        validate_search_params(threshold, limit)

        logger.info(f"{__name__}:astream - START query_len={len(query)}")

        results = await self._retriever.search(query, threshold, limit)
        if not results:
            logger.warning(f"{__name__}:astream - No similar chunks, answering without context")

        yield StreamEvent(
            event=StreamEventType.CONTEXT,
            data={"results": [result.model_dump(mode="json") for result in results]},
        )

        messages = build_messages(query, results)
        full_answer = ""
        token_index = 0
        async for fragment in self._stream_fragments(messages):
            full_answer += fragment
            yield StreamEvent(
                event=StreamEventType.TOKEN,
                data={"token": fragment, "index": token_index},
            )
            token_index += 1

        logger.info(
            f"{__name__}:astream - Streamed {token_index} fragments, answer_len={len(full_answer)}"
        )
        yield StreamEvent(
            event=StreamEventType.COMPLETE,
            data={
                "full_answer": full_answer,
                "answer": ComposedAnswer(query=query, answer=full_answer, results=results),
            },
        )

    async def compose(
        self,
        query: str,
        threshold: float | None = None,
        limit: int | None = None,
    ) -> ComposedAnswer:
        """Run astream() to completion and return the composed answer."""
        async for event in self.astream(query, threshold, limit):
            if event.event == StreamEventType.COMPLETE:
                return event.data["answer"]
        raise ProviderError("Answer stream ended without completion", provider="generation")

    async def _stream_fragments(self, messages) -> AsyncIterator[str]:
        """Yield non-empty text fragments, each under the fragment deadline."""
        stream = self._model.astream(messages).__aiter__()
        while True:
            try:
                chunk = await asyncio.wait_for(stream.__anext__(), timeout=self._fragment_timeout)
            except StopAsyncIteration:
                return
            except asyncio.TimeoutError as e:
                raise ProviderError(
                    f"No fragment received within {self._fragment_timeout}s",
                    provider="generation",
                ) from e
            except Exception as e:
                raise ProviderError(
                    f"Generation failed: {type(e).__name__}: {e}",
                    provider="generation",
                ) from e

            text = _fragment_text(chunk)
            if text:
                yield text
