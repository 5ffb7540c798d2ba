"""
Command-line application entry point.

Registers the docrag commands on a Typer app; Typer reports unknown
commands as usage errors.

Dependencies: typer, rich, docrag.dependencies, docrag.observability
System role: Application initialization and command dispatch
"""

import asyncio
import logging
import time
from pathlib import Path
from typing import Optional

import typer
from sqlalchemy.exc import SQLAlchemyError
from rich.console import Console
from rich.table import Table

from docrag.boundary.db.create_tables import create_all_tables, drop_all_tables
from docrag.configs import get_settings
from docrag.core.exceptions import DocRagException
from docrag.dependencies import (
    get_chat_service,
    get_document_service,
    get_document_store,
    get_search_service,
)
from docrag.models.streaming import StreamEventType
from docrag.observability.logger import configure_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="docrag: load PDFs into a vector store and ask questions about them.",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level (defaults to LOG_LEVEL)"),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(log_level or get_settings().log_level)


def _report_done(start_time: float) -> None:
    console.print(f"Done in {time.perf_counter() - start_time:.2f}s")


def _fail(error: DocRagException) -> None:
    console.print(f"[red]Error:[/] {error.message}")
    raise typer.Exit(1)


@app.command("init-db")
def init_db(
    reset: bool = typer.Option(False, "--reset", help="Drop existing tables and their data first"),
) -> None:
    """Create the vector extension, tables and indexes."""
    start_time = time.perf_counter()

    async def _run() -> None:
        if reset:
            await drop_all_tables()
        await create_all_tables()

    try:
        asyncio.run(_run())
    except (SQLAlchemyError, OSError) as e:
        console.print(f"[red]Error:[/] Could not create schema: {e}")
        raise typer.Exit(1)
    console.print("[green]Database schema ready[/]")
    _report_done(start_time)


@app.command()
def loadfile(
    path: Path = typer.Option(..., "-p", "--path", help="Path to the PDF file to load"),
) -> None:
    """Parse a PDF and store one embedded chunk per page."""
    start_time = time.perf_counter()

    async def _run():
        store = get_document_store()
        try:
            return await get_document_service(store).load_file(path)
        finally:
            await store.close()

    try:
        document, result = asyncio.run(_run())
    except DocRagException as e:
        _fail(e)

    table = Table(title="Document")
    table.add_column("id")
    table.add_column("name")
    table.add_column("created_at")
    table.add_row(str(document.id), document.name, document.created_at.isoformat())
    console.print(table)

    console.print(f"[bold]Stored chunks:[/] {result.stored_chunks}")
    if result.skipped_positions:
        console.print(f"[bold]Skipped empty pages:[/] {', '.join(map(str, result.skipped_positions))}")
    for failure in result.failed_pages:
        console.print(f"[red]Page {failure.position} failed:[/] {failure.error_type}: {failure.message}")

    _report_done(start_time)
    if result.is_failure:
        raise typer.Exit(1)


@app.command()
def search(
    query: list[str] = typer.Argument(..., help="Query text"),
    threshold: Optional[float] = typer.Option(None, "--threshold", min=0.0, max=1.0, help="Minimum similarity"),
    limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Maximum number of chunks"),
) -> None:
    """Print the stored chunks most similar to the query."""
    start_time = time.perf_counter()
    query_text = " ".join(query)

    async def _run():
        store = get_document_store()
        try:
            return await get_search_service(store).search(query_text, threshold, limit)
        finally:
            await store.close()

    try:
        results = asyncio.run(_run())
    except DocRagException as e:
        _fail(e)

    if not results:
        console.print("No similar chunks found!")
    for result in results:
        console.rule(f"chunk {result.chunk_id}")
        console.print(f"[bold]page:[/] {result.position}  [bold]similarity:[/] {result.similarity:.4f}")
        console.print(result.content, markup=False)

    _report_done(start_time)


@app.command()
def ask(
    query: list[str] = typer.Argument(..., help="Question to answer"),
    threshold: Optional[float] = typer.Option(None, "--threshold", min=0.0, max=1.0, help="Minimum similarity"),
    limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Maximum number of context chunks"),
    transcript: Optional[Path] = typer.Option(None, "--transcript", help="Write a markdown transcript to this path"),
) -> None:
    """Answer a question grounded in the stored chunks, streaming the reply."""
    start_time = time.perf_counter()
    question = " ".join(query)

    async def _run():
        store = get_document_store()
        try:
            results = []
            service = get_chat_service(store)
            async for event in service.stream_answer(question, threshold, limit, transcript):
                if event.event == StreamEventType.TOKEN:
                    console.print(event.data["token"], end="", markup=False, highlight=False)
                elif event.event == StreamEventType.COMPLETE:
                    results = event.data["answer"].results
            return results
        finally:
            await store.close()

    try:
        results = asyncio.run(_run())
    except DocRagException as e:
        console.print()
        _fail(e)

    console.print()
    if results:
        table = Table(title="Chunks used")
        table.add_column("id")
        table.add_column("page", justify="right")
        table.add_column("similarity", justify="right")
        for result in results:
            table.add_row(str(result.chunk_id), str(result.position), f"{result.similarity:.4f}")
        console.print(table)
    else:
        console.print("[dim]No similar chunks found, answered without context[/]")
    if transcript is not None:
        console.print(f"[bold]Transcript:[/] {transcript}")

    _report_done(start_time)


if __name__ == "__main__":
    app()
