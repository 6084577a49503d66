"""Paged access to the entry collection feed."""

from __future__ import annotations

from ..atom.parser import parse_feed_page
from ..core.types import FeedPage
from .client import AtomPubClient


class FeedPageSource:
    """Fetches feed pages one at a time, each with a fresh signed request.

    Pages are never cached: fetching the same URL twice issues two requests.
    """

    def __init__(self, client: AtomPubClient, endpoint: str, fallback_blog_url: str | None = None):
        self._client = client
        self.endpoint = endpoint
        self._fallback_blog_url = fallback_blog_url

    def fetch_first_page(self, endpoint: str | None = None) -> FeedPage:
        return self.fetch_page(endpoint or self.endpoint)

    def fetch_page(self, url: str) -> FeedPage:
        response = self._client.get(url)
        return parse_feed_page(response.content, self._fallback_blog_url)
