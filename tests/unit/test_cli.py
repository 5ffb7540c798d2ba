"""
Test suite for the command-line application.

Invokes the Typer app with CliRunner; stores and providers are replaced
with in-memory doubles.

System role: Verification of command dispatch and console output
"""

import asyncio
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from langchain_core.language_models.fake_chat_models import GenericFakeChatModel
from langchain_core.messages import AIMessage
from typer.testing import CliRunner

from docrag.application.services import ChatService, DocumentService, SearchService
from docrag.boundary.vdb.memory_store import InMemoryDocumentStore
from docrag.core.document_processing import IngestionPipeline
from docrag.core.rag_query import AnswerComposer
from docrag.core.retriever import SimilarityRetriever
from docrag.main import app

runner = CliRunner()


@pytest.fixture
def seeded_store(memory_store: InMemoryDocumentStore, embedder) -> InMemoryDocumentStore:
    """Provide store holding one embedded page."""

    async def _seed() -> None:
        document = await memory_store.create_document("guide.pdf")
        text = "pgvector stores embeddings in PostgreSQL"
        await memory_store.insert_chunk(document.id, 1, text, await embedder.embed(text))

    asyncio.run(_seed())
    return memory_store


@pytest.fixture
def patched_services(seeded_store: InMemoryDocumentStore, embedder):
    """Route the CLI's store and service factories to in-memory doubles."""
    retriever = SimilarityRetriever(seeded_store, embedder)

    def _chat_service(store):
        model = GenericFakeChatModel(messages=iter([AIMessage(content="It stores vectors.")]))
        return ChatService(AnswerComposer(retriever, model))

    with patch("docrag.main.get_document_store", return_value=seeded_store), patch(
        "docrag.main.get_document_service",
        side_effect=lambda store: DocumentService(store, IngestionPipeline(store, embedder)),
    ), patch(
        "docrag.main.get_search_service",
        side_effect=lambda store: SearchService(retriever),
    ), patch("docrag.main.get_chat_service", side_effect=_chat_service):
        yield seeded_store


class TestCommandRegistry:
    """Test suite for command dispatch."""

    def test_unknown_command_should_be_usage_error(self) -> None:
        result = runner.invoke(app, ["frobnicate"])

        assert result.exit_code == 2

    def test_search_should_reject_threshold_out_of_range(self) -> None:
        result = runner.invoke(app, ["search", "query", "--threshold", "1.5"])

        assert result.exit_code == 2


class TestInitDbCommand:
    """Test suite for the init-db command."""

    def test_init_db_should_drop_then_create_with_reset(self) -> None:
        # Arrange
        calls = []
        create = AsyncMock(side_effect=lambda: calls.append("create"))
        drop = AsyncMock(side_effect=lambda: calls.append("drop"))

        # Act
        with patch("docrag.main.create_all_tables", create), patch("docrag.main.drop_all_tables", drop):
            result = runner.invoke(app, ["init-db", "--reset"])

        # Assert
        assert result.exit_code == 0
        assert calls == ["drop", "create"]
        assert "Done in" in result.output

    def test_init_db_should_exit_nonzero_when_database_unreachable(self) -> None:
        create = AsyncMock(side_effect=OSError("connection refused"))

        with patch("docrag.main.create_all_tables", create):
            result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 1
        assert "Could not create schema" in result.output


class TestSearchCommand:
    """Test suite for the search command."""

    def test_search_should_print_matching_chunk(self, patched_services) -> None:
        result = runner.invoke(app, ["search", "pgvector", "stores", "embeddings", "in", "PostgreSQL"])

        assert result.exit_code == 0
        assert "pgvector stores embeddings in PostgreSQL" in result.output
        assert "Done in" in result.output

    def test_search_should_report_no_matches(self, patched_services) -> None:
        result = runner.invoke(app, ["search", "unrelated", "question"])

        assert result.exit_code == 0
        assert "No similar chunks found!" in result.output


class TestLoadfileCommand:
    """Test suite for the loadfile command."""

    def test_loadfile_should_fail_for_missing_file(self, patched_services, tmp_path: Path) -> None:
        result = runner.invoke(app, ["loadfile", "-p", str(tmp_path / "missing.pdf")])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_loadfile_should_report_stored_chunks(self, patched_services, tmp_path: Path) -> None:
        # Arrange
        pdf = tmp_path / "doc.pdf"
        pdf.write_bytes(b"%PDF-1.4\n")

        # Act
        with patch(
            "docrag.core.document_processing.tasks.parsing_task.PdfPageLoader.load",
            return_value={1: "first page", 2: "second page"},
        ):
            result = runner.invoke(app, ["loadfile", "-p", str(pdf)])

        # Assert
        assert result.exit_code == 0
        assert "Stored chunks:" in result.output
        assert "Done in" in result.output


class TestAskCommand:
    """Test suite for the ask command."""

    def test_ask_should_stream_answer_and_write_transcript(self, patched_services, tmp_path: Path) -> None:
        # Arrange
        transcript = tmp_path / "ask.md"

        # Act
        result = runner.invoke(
            app,
            ["ask", "pgvector stores embeddings in PostgreSQL", "--transcript", str(transcript)],
        )

        # Assert
        assert result.exit_code == 0
        assert "It stores vectors." in result.output
        assert "Done in" in result.output
        assert "## Answer" in transcript.read_text(encoding="utf-8")

    def test_ask_should_report_unwritable_transcript_as_error(self, patched_services, tmp_path: Path) -> None:
        # Arrange
        blocker = tmp_path / "notes.txt"
        blocker.write_text("not a directory", encoding="utf-8")

        # Act
        result = runner.invoke(
            app,
            ["ask", "pgvector stores embeddings in PostgreSQL", "--transcript", str(blocker / "out.md")],
        )

        # Assert
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Could not write transcript" in result.output
        assert not isinstance(result.exception, OSError)
