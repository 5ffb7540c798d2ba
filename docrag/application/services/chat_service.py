"""
Chat service for grounded Q&A.

Streams composer events and writes an optional markdown transcript once
the answer is complete.

Dependencies: docrag.core.rag_query, docrag.application.transcript_writer
System role: Chat service orchestration layer
"""

import logging
from collections.abc import AsyncGenerator
from pathlib import Path

from docrag.application.transcript_writer import TranscriptWriter
from docrag.core.rag_query.answer_composer import AnswerComposer
from docrag.models.streaming import StreamEvent, StreamEventType

logger = logging.getLogger(__name__)


class ChatService:
    """Chat service for single-turn grounded questions."""

    def __init__(
        self,
        composer: AnswerComposer,
        transcript_writer: TranscriptWriter | None = None,
    ) -> None:
        """
        Initialize chat service.

        Args:
            composer: Answer composer
            transcript_writer: Markdown writer (created if None)
        """
        self._composer = composer
        self._transcript_writer = transcript_writer or TranscriptWriter()

    async def stream_answer(
        self,
        question: str,
        threshold: float | None = None,
        limit: int | None = None,
        transcript_path: str | Path | None = None,
    ) -> AsyncGenerator[StreamEvent, None]:
        """
        Stream answer events for a question.

        Args:
            question: User's question
            threshold: Minimum similarity (default if None)
            limit: Maximum context chunks (default if None)
            transcript_path: Markdown file written after COMPLETE (skipped if None)

        Yields:
            StreamEvent: Context, token and complete events
        """
        logger.info(f"{__name__}:stream_answer - START question_len={len(question)}")

        async for event in self._composer.astream(question, threshold, limit):
            if event.event == StreamEventType.COMPLETE and transcript_path is not None:
                self._transcript_writer.write(transcript_path, event.data["answer"])
            yield event
