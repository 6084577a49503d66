"""
Authenticated fetching.

This package handles signed HTTP requests against the AtomPub API
and page-by-page access to the entry feed.
"""

from .client import ATOM_CONTENT_TYPE, ApiResponse, AtomPubClient
from .pages import FeedPageSource

__all__ = [
    "ATOM_CONTENT_TYPE",
    "ApiResponse",
    "AtomPubClient",
    "FeedPageSource",
]
