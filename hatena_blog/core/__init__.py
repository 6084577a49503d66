"""
Core domain models and reference parsing.

This package contains data types and parsing logic that is
independent of the HTTP layer.
"""

from .reference import (
    extract_entry_id,
    is_date_based_reference,
    is_entry_id,
    parse_search_target,
)
from .types import (
    BlogEntry,
    Candidate,
    FeedPage,
    PublishResult,
    RawEntry,
    SearchTarget,
    entry_id_from_tag,
)

__all__ = [
    "BlogEntry",
    "Candidate",
    "FeedPage",
    "PublishResult",
    "RawEntry",
    "SearchTarget",
    "entry_id_from_tag",
    "extract_entry_id",
    "is_date_based_reference",
    "is_entry_id",
    "parse_search_target",
]
