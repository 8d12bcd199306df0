"""Transcript crawler CLI.

Usage:
    python cli/main.py --help

Commands:
    crawl  → fetch the archive index, store the first transcript found
    parse  → parse a saved raw transcript file and print its speaker turns
    key    → print the storage key a transcript URL would be stored under
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that
# `from transcript_crawler.xxx import ...` works when the CLI is invoked as
# `python cli/main.py` from any working directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from transcript_crawler.config import Settings
from transcript_crawler.crawler import crawl as run_crawl
from transcript_crawler.errors import NavigationError
from transcript_crawler.log_config import configure_logging
from transcript_crawler.scraper.fetcher import open_session
from transcript_crawler.storage.keys import derive_key
from transcript_crawler.storage.sinks import build_sink
from transcript_crawler.transcript.parser import parse_transcript, turns_to_json

app = typer.Typer(
    name="transcript-crawler",
    help="Crawl a transcript archive and store parsed speaker turns.",
    no_args_is_help=True,
)


def _load_settings() -> Settings:
    settings = Settings()
    configure_logging(settings.log_level, json_output=settings.json_logs)
    return settings


@app.command("crawl")
def crawl(
    start_url: Optional[str] = typer.Option(
        None, "--start-url", help="Archive index URL (defaults to START_URL)."
    ),
) -> None:
    """Crawl from the archive index and store the first transcript found."""
    settings = _load_settings()
    url = start_url or settings.start_url

    typer.echo(f"[crawl] Starting at {url!r} …")
    try:
        result = run_crawl(
            url,
            session=open_session(settings),
            sink=build_sink(settings),
            content_selector=settings.content_selector,
        )
    except NavigationError as exc:
        typer.echo(f"[crawl] ✗ {exc}", err=True)
        raise typer.Exit(1)

    typer.echo(f"[crawl] Pages fetched: {len(result.visited)}")
    if result.stored_key:
        typer.echo(f"[crawl] ✓ Stored {result.stored_key}")
    else:
        typer.echo("[crawl] No transcript stored.")


@app.command("parse")
def parse(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Raw transcript file."),
    as_json: bool = typer.Option(False, "--json", help="Print turns as JSON."),
) -> None:
    """Parse a saved raw transcript and print its consolidated speaker turns."""
    _load_settings()
    turns = parse_transcript(path.read_text(encoding="utf-8"))

    if as_json:
        typer.echo(turns_to_json(turns))
        return
    if not turns:
        typer.echo("[parse] No dialogue found.")
        return
    for turn in turns:
        typer.echo(f"{turn.speaker}: {turn.value}")


@app.command("key")
def key(
    url: str = typer.Argument(..., help="Transcript page URL."),
    start_url: Optional[str] = typer.Option(
        None, "--start-url", help="Archive index URL (defaults to START_URL)."
    ),
) -> None:
    """Print the storage key for a transcript URL."""
    settings = _load_settings()
    typer.echo(derive_key(url, start_url or settings.start_url))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
