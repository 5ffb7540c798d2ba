"""
Markdown transcript export.

Writes one ask (question, answer, sources used) as a markdown file.

Dependencies: docrag.core.exceptions, docrag.models
System role: Optional persistence of composed answers
"""

import logging
from pathlib import Path

from docrag.core.exceptions import ExportError
from docrag.models.answer import ComposedAnswer

logger = logging.getLogger(__name__)


class TranscriptWriter:
    """Render and write composed answers as markdown."""

    def render(self, answer: ComposedAnswer) -> str:
        lines = [
            "# Question",
            "",
            answer.query,
            "",
            "## Answer",
            "",
            answer.answer,
            "",
            "## Sources",
            "",
        ]
        if answer.results:
            lines.append("| Chunk | Page | Similarity |")
            lines.append("|---|---|---|")
            lines.extend(
                f"| {result.chunk_id} | {result.position} | {result.similarity:.4f} |"
                for result in answer.results
            )
        else:
            lines.append("No similar chunks were used.")
        return "\n".join(lines) + "\n"

    def write(self, path: str | Path, answer: ComposedAnswer) -> Path:
        """
        Write the transcript, creating parent directories.

        Args:
            path: Destination markdown file
            answer: Composed answer to export

        Returns:
            Path: The written file

        Raises:
            ExportError: The file or its parent directories cannot be written
        """
        target = Path(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(self.render(answer), encoding="utf-8")
        except OSError as e:
            raise ExportError(
                f"Could not write transcript: {e.strerror or e}",
                file_path=str(target),
            ) from e
        logger.info(f"{__name__}:write - Transcript written to {target}")
        return target
