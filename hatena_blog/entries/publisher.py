"""
Posting and updating entries.

Both operations send an Atom entry with a Markdown body; posting goes to
the collection endpoint and must answer 201 Created, updating PUTs to the
entry's own URL.
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from ..atom.builder import build_entry_xml
from ..atom.parser import parse_entry_document
from ..core.types import PublishResult
from ..fetch.client import ApiResponse, AtomPubClient


class EntryPublisher:
    """Creates and updates entries as the configured author."""

    def __init__(
        self,
        client: AtomPubClient,
        endpoint: str,
        author: str,
        edit_url: Callable[[str], str] | None = None,
    ):
        self._client = client
        self.endpoint = endpoint.rstrip("/")
        self.author = author
        self._edit_url = edit_url

    def post(
        self,
        title: str,
        content: str,
        draft: bool = True,
        updated: datetime | None = None,
    ) -> PublishResult:
        """Create a new entry (a draft unless draft=False)."""
        body = build_entry_xml(title, content, draft, self.author, updated)
        response = self._client.post(self.endpoint, body)
        return self._result(response, draft)

    def update(
        self,
        entry_id: str,
        title: str,
        content: str,
        draft: bool = True,
        updated: datetime | None = None,
    ) -> PublishResult:
        """Replace the title and body of an existing entry."""
        body = build_entry_xml(title, content, draft, self.author, updated)
        response = self._client.put(f"{self.endpoint}/{entry_id}", body)
        return self._result(response, draft, fallback_id=entry_id)

    def _result(self, response: ApiResponse, draft: bool, fallback_id: str | None = None) -> PublishResult:
        entry = parse_entry_document(response.content)
        entry_id = entry.entry_id or fallback_id
        return PublishResult(
            entry_id=entry_id,
            title=entry.title,
            url=entry.url,
            edit_url=self._edit_url(entry_id) if self._edit_url and entry_id else None,
            published=entry.published_at.isoformat() if entry.published_at else None,
            draft=draft,
        )
