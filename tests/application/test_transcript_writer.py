"""
Test suite for TranscriptWriter.

System role: Verification of markdown transcript export
"""

from pathlib import Path

import pytest

from docrag.application.transcript_writer import TranscriptWriter
from docrag.core.exceptions import ExportError
from docrag.models.answer import ComposedAnswer


class TestTranscriptWriter:
    """Test suite for TranscriptWriter.write()."""

    def test_write_should_render_question_answer_and_sources(self, tmp_path: Path, make_result) -> None:
        # Arrange
        result = make_result("context", similarity=0.91234, position=7)
        answer = ComposedAnswer(query="What is HNSW?", answer="A graph index.", results=[result])
        target = tmp_path / "nested" / "dir" / "answer.md"

        # Act
        written = TranscriptWriter().write(target, answer)

        # Assert
        content = written.read_text(encoding="utf-8")
        assert content.startswith("# Question\n\nWhat is HNSW?\n")
        assert "## Answer\n\nA graph index.\n" in content
        assert "## Sources" in content
        assert f"| {result.chunk_id} | 7 | 0.9123 |" in content

    def test_write_should_note_missing_sources(self, tmp_path: Path) -> None:
        answer = ComposedAnswer(query="Q", answer="A")

        content = TranscriptWriter().write(tmp_path / "a.md", answer).read_text(encoding="utf-8")

        assert "No similar chunks were used." in content

    def test_write_should_raise_export_error_when_parent_is_a_file(self, tmp_path: Path) -> None:
        # Arrange
        blocker = tmp_path / "notes.txt"
        blocker.write_text("not a directory", encoding="utf-8")
        answer = ComposedAnswer(query="Q", answer="A")

        # Act
        with pytest.raises(ExportError) as exc_info:
            TranscriptWriter().write(blocker / "out.md", answer)

        # Assert
        assert exc_info.value.details["file_path"] == str(blocker / "out.md")
        assert isinstance(exc_info.value.__cause__, OSError)
