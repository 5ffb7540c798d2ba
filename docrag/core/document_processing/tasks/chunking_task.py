"""
Page chunking task.

Turns a page mapping into ordered page units, one chunk per page.
Pages that are empty after whitespace normalization are set aside.

Dependencies: docrag.core.document_processing.models
System role: Second stage of document ingestion pipeline
"""

from collections.abc import Mapping

from ..models import PageText


class ChunkingTask:
    """Split a document into one unit per non-empty page."""

    def chunk(self, pages: Mapping[int, str]) -> tuple[list[PageText], list[int]]:
        """
        Build page units in position order.

        Args:
            pages: Page number -> raw text

        Returns:
            tuple: (units to embed and store, skipped empty positions)
        """
        units: list[PageText] = []
        skipped: list[int] = []

        for position in sorted(pages):
            text = pages[position] or ""
            if not " ".join(text.split()):
                skipped.append(position)
                continue
            units.append(PageText(position=position, text=text))

        return units, skipped
