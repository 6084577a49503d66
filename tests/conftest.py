"""Shared fixtures: Atom documents and a recording httpx transport."""

from __future__ import annotations

from datetime import datetime, timezone

import httpx
import pytest

from hatena_blog.config import AppConfig, BlogConfig

HATENA_ID = "someone"
BLOG_ID = "someone.hatenadiary.com"
API_KEY = "test-api-key"
ENDPOINT = f"https://blog.hatena.ne.jp/{HATENA_ID}/{BLOG_ID}/atom/entry"
TAG_PREFIX = "tag:blog.hatena.ne.jp,2013:blog-someone-17680117126972923446-"


def feed_entry_xml(
    entry_id: str,
    published: str | None = None,
    alternate: str | None = None,
    title: str | None = "Entry",
) -> str:
    parts = [f"<id>{TAG_PREFIX}{entry_id}</id>"]
    if alternate:
        parts.append(f'<link rel="alternate" type="text/html" href="{alternate}"/>')
    if title is not None:
        parts.append(f"<title>{title}</title>")
    if published:
        parts.append(f"<published>{published}</published>")
    return "<entry>" + "".join(parts) + "</entry>"


def feed_xml(entries: list[str], next_url: str | None = None) -> str:
    next_link = f'<link rel="next" href="{next_url}"/>' if next_url else ""
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<feed xmlns="http://www.w3.org/2005/Atom">'
        f"{next_link}{''.join(entries)}</feed>"
    )


def entry_document_xml(
    entry_id: str = "13574176438046791234",
    title: str | None = "Test Article Title",
    content: str | None = "# Test Content\n\nThis is **Markdown**.",
    published: str | None = "2024-01-01T12:34:56+09:00",
    alternate: str | None = f"https://{BLOG_ID}/entry/2024/01/01/123456",
    draft: str = "no",
) -> str:
    parts = [f"<id>{TAG_PREFIX}{entry_id}</id>"]
    if alternate:
        parts.append(f'<link rel="alternate" type="text/html" href="{alternate}"/>')
    if title is not None:
        parts.append(f"<title>{title}</title>")
    if published:
        parts.append(f"<published>{published}</published>")
    if content is not None:
        parts.append(f'<content type="text/x-markdown">{content}</content>')
    parts.append('<category term="Python"/>')
    parts.append(f"<app:control><app:draft>{draft}</app:draft></app:control>")
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<entry xmlns="http://www.w3.org/2005/Atom" xmlns:app="http://www.w3.org/2007/app">'
        + "".join(parts)
        + "</entry>"
    )


class RecordingTransport(httpx.MockTransport):
    """MockTransport that answers from a route table and keeps every request."""

    def __init__(self, routes: dict[tuple[str, str], httpx.Response | Exception]):
        self.routes = routes
        self.requests: list[httpx.Request] = []
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        answer = self.routes.get((request.method, str(request.url)))
        if answer is None:
            return httpx.Response(404, text=f"no route for {request.method} {request.url}")
        if isinstance(answer, Exception):
            raise answer
        return answer


def atom_response(xml: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=xml.encode("utf-8"),
        headers={"Content-Type": "application/atom+xml"},
    )


def fixed_clock() -> datetime:
    return datetime(2024, 1, 1, 3, 34, 56, tzinfo=timezone.utc)


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig(blog=BlogConfig(hatena_id=HATENA_ID, blog_id=BLOG_ID, api_key=API_KEY))
