"""Tests for terminal rendering."""

from datetime import datetime, timedelta, timezone
import io

from rich.console import Console

from hatena_blog.core.types import BlogEntry, PublishResult
from hatena_blog.output.renderer import OutputMode, render_entry, render_publish_result

JST = timezone(timedelta(hours=9))


def _console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


def _entry(**overrides) -> BlogEntry:
    values = dict(
        entry_id="1",
        title="Title [with brackets]",
        content="# Heading\n\n[link](https://example.com)",
        published_at=datetime(2024, 1, 1, 12, 34, 56, tzinfo=JST),
        url="https://b.example/entry/1",
    )
    values.update(overrides)
    return BlogEntry(**values)


def test_full_format_prints_every_field_verbatim():
    console, buffer = _console()
    render_entry(console, _entry())
    text = buffer.getvalue()

    assert "Title: Title [with brackets]" in text
    assert "Published: 2024-01-01 12:34:56" in text
    assert "URL: https://b.example/entry/1" in text
    assert "[link](https://example.com)" in text
    assert "=" * 60 in text


def test_single_field_modes():
    expectations = {
        OutputMode.RAW: "# Heading\n\n[link](https://example.com)\n",
        OutputMode.TITLE: "Title [with brackets]\n",
        OutputMode.DATE: "2024-01-01 12:34:56\n",
        OutputMode.URL: "https://b.example/entry/1\n",
    }
    for mode, expected in expectations.items():
        console, buffer = _console()
        render_entry(console, _entry(), mode)
        assert buffer.getvalue() == expected


def test_apparent_datetime_takes_precedence():
    console, buffer = _console()
    render_entry(console, _entry(apparent_datetime=datetime(2024, 1, 1, 12, 34)), OutputMode.DATE)
    assert buffer.getvalue() == "2024-01-01 12:34:00\n"


def test_missing_fields_use_placeholders():
    console, buffer = _console()
    render_entry(console, _entry(title=None, content=None, published_at=None))
    text = buffer.getvalue()
    assert "(no title)" in text
    assert "(no content)" in text
    assert "(unknown date)" in text


def test_publish_result_shows_edit_url_for_drafts():
    result = PublishResult(
        entry_id="1",
        title="T",
        url="https://b.example/entry/1",
        edit_url="https://blog.hatena.ne.jp/u/b/edit?entry=1",
        published=None,
        draft=True,
    )
    console, buffer = _console()
    render_publish_result(console, result, "Update")
    assert "Update completed (draft)" in buffer.getvalue()
    assert "URL: https://blog.hatena.ne.jp/u/b/edit?entry=1" in buffer.getvalue()

    result.draft = False
    console, buffer = _console()
    render_publish_result(console, result, "Update")
    assert "URL: https://b.example/entry/1" in buffer.getvalue()
