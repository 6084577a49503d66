"""
High-level access to one Hatena blog.

HatenaBlog wires the signed client, feed page source, resolver, entry
fetcher and publisher together from an AppConfig, and accepts any kind
of entry reference: a bare id, an entry URL, or a date-based URL.

Example:
    >>> cfg = load_config("config.yaml")
    >>> with HatenaBlog.from_config(cfg) as blog:
    ...     entry = blog.fetch_entry("https://example.hatenadiary.com/entry/2024/01/01/123456")
"""

from __future__ import annotations

import logging

from .config import AppConfig
from .core.reference import (
    extract_entry_id,
    is_date_based_reference,
    is_entry_id,
    parse_search_target,
)
from .core.types import BlogEntry, PublishResult
from .entries.fetcher import EntryFetcher
from .entries.publisher import EntryPublisher
from .errors import ConfigurationError, NotFoundError
from .fetch.client import AtomPubClient
from .fetch.pages import FeedPageSource
from .search.resolver import EntryResolver
from .utils.logging import get_logger


class HatenaBlog:
    """Fetch, resolve, update and post entries of a single blog."""

    def __init__(self, cfg: AppConfig, client: AtomPubClient, logger: logging.Logger | None = None):
        self.cfg = cfg
        self._client = client
        blog = cfg.blog
        self.fetcher = EntryFetcher(client, blog.endpoint, blog.blog_url)
        self.resolver = EntryResolver(
            FeedPageSource(client, blog.endpoint, blog.blog_url),
            self.fetcher,
            max_pages=cfg.search.max_pages,
            max_date_diff_days=cfg.search.max_date_diff_days,
            max_time_diff_seconds=cfg.search.max_time_diff_seconds,
            deadline_seconds=cfg.search.deadline_seconds,
            logger=logger,
        )
        self.publisher = EntryPublisher(client, blog.endpoint, blog.hatena_id, blog.edit_url)

    @classmethod
    def from_config(cls, cfg: AppConfig, **client_kwargs) -> "HatenaBlog":
        """Build from configuration; fails before any request if settings are missing.

        Args:
            cfg: Application configuration
            **client_kwargs: Passed to AtomPubClient (e.g., transport, random_source)

        Raises:
            ConfigurationError: If the hatena id, blog id or API key is missing
        """
        if not cfg.blog.blog_id:
            raise ConfigurationError("Blog id is not set. Set HATENA_BLOG_ID or blog.blog_id.")
        return cls(cfg, AtomPubClient.from_config(cfg, **client_kwargs))

    def fetch_entry(self, reference: str) -> BlogEntry:
        """Fetch an entry by URL or id.

        Date-based URLs are resolved through the feed; the result then
        carries the date and time the URL encodes.
        """
        if is_date_based_reference(reference):
            try:
                return self.resolver.resolve_and_fetch(parse_search_target(reference))
            except NotFoundError as exc:
                raise NotFoundError(reference) from exc
        entry_id = reference if is_entry_id(reference) else extract_entry_id(reference)
        return self.fetcher.fetch(entry_id)

    def resolve_entry_id(self, reference: str) -> str:
        """Turn a URL or id into an entry id usable with the API."""
        if is_entry_id(reference):
            return reference
        if is_date_based_reference(reference):
            try:
                return self.resolver.resolve(parse_search_target(reference))
            except NotFoundError as exc:
                raise NotFoundError(reference) from exc
        return extract_entry_id(reference)

    def update_entry(self, reference: str, title: str, content: str, draft: bool = True) -> PublishResult:
        entry_id = self.resolve_entry_id(reference)
        return self.publisher.update(entry_id, title, content, draft)

    def post_entry(self, title: str, content: str, draft: bool = True) -> PublishResult:
        return self.publisher.post(title, content, draft)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HatenaBlog":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
