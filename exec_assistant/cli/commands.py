"""CLI command implementations."""

from __future__ import annotations

import asyncio
import logging

import click
import uvicorn
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from exec_assistant.config import Settings
from exec_assistant.processing.analyzer import EmailAnalyzer, merge_results
from exec_assistant.processing.types import AnalysisResult
from exec_assistant.store.records import EmailStore
from exec_assistant.web.app import create_app
from exec_assistant.web.view import AssistantView

logger = logging.getLogger(__name__)
console = Console(width=160)

_PRIORITY_STYLE: dict[int, str] = {1: "blue", 2: "yellow", 3: "dark_orange", 4: "red", 5: "bold white on red"}


def _build_analyzer(settings: Settings) -> EmailAnalyzer:
    return EmailAnalyzer(
        api_key=settings.api_key,
        model=settings.model,
        max_tokens=settings.max_tokens,
    )


@click.command()
@click.option("--host", default=None, help="Bind address (default: ASSISTANT_HOST or 127.0.0.1).")
@click.option("--port", default=None, type=int, help="Port (default: ASSISTANT_PORT or 8000).")
@click.pass_obj
def serve(settings: Settings, host: str | None, port: int | None) -> None:
    """Run the web interface."""
    view = AssistantView(EmailStore(), _build_analyzer(settings))
    app = create_app(view)
    bind_host = host if host is not None else settings.host
    bind_port = port if port is not None else settings.port
    console.print(f"Serving on [bold]http://{bind_host}:{bind_port}[/bold]")
    uvicorn.run(app, host=bind_host, port=bind_port)


@click.command()
@click.pass_obj
def analyze(settings: Settings) -> None:
    """Summarise and prioritise the sample emails once and print the briefing."""
    try:
        results = asyncio.run(_analyze_async(settings))
    except Exception as exc:  # noqa: BLE001
        logger.error("Analysis failed: %s", exc, exc_info=True)
        console.print(f"[red]Analysis failed: {escape(str(exc))}[/red]")
        raise SystemExit(1) from exc
    print_briefing(results)


async def _analyze_async(settings: Settings) -> list[AnalysisResult]:
    emails = EmailStore().snapshot()
    console.print(f"Analysing {len(emails)} email(s) with [bold]{settings.model}[/bold]...")
    analyses = await _build_analyzer(settings).analyze(emails)
    return merge_results(emails, analyses)


def print_briefing(results: list[AnalysisResult]) -> None:
    """Print results, already sorted most urgent first, as a table."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold cyan")
    table.add_column("Priority", width=14)
    table.add_column("ID", style="dim", width=4)
    table.add_column("Summary", max_width=70)
    table.add_column("From", max_width=26)
    table.add_column("Subject", max_width=36)

    for result in results:
        style = _PRIORITY_STYLE.get(result.priority_score, "")
        table.add_row(
            f"[{style}]{result.priority_label} ({result.priority_score})[/{style}]",
            result.id,
            escape(result.summary),
            escape(result.sender),
            escape(result.subject),
        )

    console.print("\n[bold]Executive Briefing[/bold]\n")
    console.print(table)
