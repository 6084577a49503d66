"""
Command-line interface for Hatena Blog tools.

Uses Typer to provide fetch, update and post commands. Supports loading
.env files for the API key and account settings.
"""

from __future__ import annotations

from contextlib import contextmanager
import os
from pathlib import Path
from typing import Iterator

from dotenv import load_dotenv
import typer
from rich.console import Console

from .blog import HatenaBlog
from .config import AppConfig, load_config
from .errors import (
    ConfigurationError,
    FeedParseError,
    HatenaBlogError,
    InvalidReferenceError,
    NotFoundError,
    RemoteRequestError,
    TransportError,
)
from .output.renderer import OutputMode, render_entry, render_publish_result
from .utils.logging import setup_logging

app = typer.Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
console = Console()
err_console = Console(stderr=True)

DEFAULT_CONFIG_PATH = Path("config.yaml")

_EXIT_CODES: list[tuple[type[HatenaBlogError], int]] = [
    (ConfigurationError, 2),
    (InvalidReferenceError, 2),
    (NotFoundError, 3),
    (RemoteRequestError, 4),
    (FeedParseError, 4),
    (TransportError, 5),
]


def exit_code_for(error: HatenaBlogError) -> int:
    for error_type, code in _EXIT_CODES:
        if isinstance(error, error_type):
            return code
    return 1


@contextmanager
def _handle_errors() -> Iterator[None]:
    try:
        yield
    except HatenaBlogError as exc:
        err_console.print(f"Error: {exc}", style="red", markup=False, highlight=False)
        raise typer.Exit(code=exit_code_for(exc)) from exc


@app.callback()
def main(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, help="YAML config file."
    ),
    hatena_id: str | None = typer.Option(None, "--hatena-id", help="Hatena id (or HATENA_ID)."),
    blog_id: str | None = typer.Option(None, "--blog-id", help="Blog domain (or HATENA_BLOG_ID)."),
    api_key: str | None = typer.Option(None, "--api-key", help="API key (or HATENA_API_KEY / .env)."),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Fetch, update and post Hatena Blog entries through the AtomPub API."""
    # Load environment variables from .env if available
    load_dotenv()

    if config is None and DEFAULT_CONFIG_PATH.exists():
        config = DEFAULT_CONFIG_PATH
    with _handle_errors():
        cfg = load_config(str(config) if config else None)

    # Override with CLI options, then environment
    cfg.blog.hatena_id = hatena_id or os.getenv("HATENA_ID") or cfg.blog.hatena_id
    cfg.blog.blog_id = blog_id or os.getenv("HATENA_BLOG_ID") or cfg.blog.blog_id
    if api_key:
        cfg.blog.api_key = api_key
    if log_level:
        cfg.logging.level = log_level

    setup_logging(cfg.logging)
    ctx.obj = cfg


@app.command()
def fetch(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="Entry URL (date-based or id-based) or entry id."),
    raw: bool = typer.Option(False, "--raw", "-r", help="Print only the raw Markdown body."),
    title: bool = typer.Option(False, "--title", "-t", help="Print only the title."),
    date: bool = typer.Option(False, "--date", "-d", help="Print only the published date."),
    url_only: bool = typer.Option(False, "--url", "-u", help="Print only the URL."),
):
    """Fetch an entry and print it."""
    cfg: AppConfig = ctx.obj
    mode = _output_mode(raw, title, date, url_only)
    with _handle_errors():
        with HatenaBlog.from_config(cfg) as blog:
            entry = blog.fetch_entry(url)
    render_entry(console, entry, mode)


@app.command()
def update(
    ctx: typer.Context,
    url: str | None = typer.Option(None, "--url", "-u", help="Entry URL (exclusive with --id)."),
    entry_id: str | None = typer.Option(None, "--id", "-i", help="Entry id (exclusive with --url)."),
    title: str = typer.Option(..., "--title", "-t", help="Entry title."),
    file: Path = typer.Option(
        ..., "--file", "-f", exists=True, dir_okay=False, readable=True, help="Markdown file."
    ),
    publish: bool = typer.Option(False, "--publish", "-p", help="Publish (default is draft)."),
):
    """Update an existing entry from a Markdown file."""
    if url and entry_id:
        raise typer.BadParameter("--url and --id cannot be used together.")
    if not url and not entry_id:
        raise typer.BadParameter("Either --url or --id is required.")

    cfg: AppConfig = ctx.obj
    content = file.read_text(encoding="utf-8")
    with _handle_errors():
        with HatenaBlog.from_config(cfg) as blog:
            result = blog.update_entry(url or entry_id, title, content, draft=not publish)
    render_publish_result(console, result, "Update")


@app.command()
def post(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", "-t", help="Entry title."),
    file: Path = typer.Option(
        ..., "--file", "-f", exists=True, dir_okay=False, readable=True, help="Markdown file."
    ),
    publish: bool = typer.Option(False, "--publish", "-p", help="Publish (default is draft)."),
):
    """Post a new entry from a Markdown file."""
    cfg: AppConfig = ctx.obj
    content = file.read_text(encoding="utf-8")
    with _handle_errors():
        with HatenaBlog.from_config(cfg) as blog:
            result = blog.post_entry(title, content, draft=not publish)
    render_publish_result(console, result, "Post")


def _output_mode(raw: bool, title: bool, date: bool, url_only: bool) -> OutputMode:
    if raw:
        return OutputMode.RAW
    if title:
        return OutputMode.TITLE
    if date:
        return OutputMode.DATE
    if url_only:
        return OutputMode.URL
    return OutputMode.FULL


if __name__ == "__main__":
    app()
