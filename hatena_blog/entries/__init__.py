"""
Entry operations.

Fetching a single entry by id, and posting or updating entries.
"""

from .fetcher import EntryFetcher
from .publisher import EntryPublisher

__all__ = ["EntryFetcher", "EntryPublisher"]
