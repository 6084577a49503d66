"""Retrieval of a single entry by id."""

from __future__ import annotations

from ..atom.parser import parse_entry_document
from ..core.types import BlogEntry
from ..fetch.client import AtomPubClient


class EntryFetcher:
    """Fetches full entries from <endpoint>/<entry_id>."""

    def __init__(self, client: AtomPubClient, endpoint: str, fallback_blog_url: str | None = None):
        self._client = client
        self.endpoint = endpoint.rstrip("/")
        self._fallback_blog_url = fallback_blog_url

    def entry_url(self, entry_id: str) -> str:
        return f"{self.endpoint}/{entry_id}"

    def fetch(self, entry_id: str) -> BlogEntry:
        response = self._client.get(self.entry_url(entry_id))
        entry = parse_entry_document(response.content, self._fallback_blog_url)
        if entry.entry_id is None:
            entry.entry_id = entry_id
        return entry
