"""
Terminal output for fetched and published entries.

Text is written with Console.out so Markdown bodies are printed verbatim,
without Rich markup or highlighting.
"""

from __future__ import annotations

from enum import Enum

from rich.console import Console

from ..core.types import BlogEntry, PublishResult

NO_TITLE = "(no title)"
NO_CONTENT = "(no content)"
UNKNOWN_DATE = "(unknown date)"
RULE_WIDTH = 60


class OutputMode(str, Enum):
    FULL = "full"
    RAW = "raw"
    TITLE = "title"
    DATE = "date"
    URL = "url"


def format_published(entry: BlogEntry) -> str:
    """Return the display date, preferring the date encoded in the lookup URL."""
    moment = entry.apparent_datetime or entry.published_at
    if moment is None:
        return UNKNOWN_DATE
    return moment.strftime("%Y-%m-%d %H:%M:%S")


def render_entry(console: Console, entry: BlogEntry, mode: OutputMode = OutputMode.FULL) -> None:
    title = entry.title or NO_TITLE
    content = entry.content if entry.content is not None else NO_CONTENT
    url = entry.url or ""

    if mode is OutputMode.RAW:
        _out(console, content)
    elif mode is OutputMode.TITLE:
        _out(console, title)
    elif mode is OutputMode.DATE:
        _out(console, format_published(entry))
    elif mode is OutputMode.URL:
        _out(console, url)
    else:
        _out(console, "=" * RULE_WIDTH)
        _out(console, f"Title: {title}")
        _out(console, f"Published: {format_published(entry)}")
        _out(console, f"URL: {url}")
        _out(console, "=" * RULE_WIDTH)
        _out(console, "Content (Markdown):")
        _out(console, "-" * RULE_WIDTH)
        _out(console, content)
        _out(console, "=" * RULE_WIDTH)


def render_publish_result(console: Console, result: PublishResult, action: str) -> None:
    """Print the outcome of a post or update.

    Drafts show the edit page URL when one is known, published entries
    their public URL.
    """
    status = "draft" if result.draft else "published"
    url = (result.edit_url or result.url) if result.draft else result.url
    _out(console, f"{action} completed ({status})")
    _out(console, f"Title: {result.title or NO_TITLE}")
    _out(console, f"URL: {url or ''}")


def _out(console: Console, text: str) -> None:
    console.out(text, highlight=False)
