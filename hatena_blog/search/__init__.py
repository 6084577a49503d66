"""
Date-based entry search.

Scoring of feed entries against a target date/time and the paginated
resolver that picks the best match.
"""

from .resolver import MAX_PAGES, EntryResolver, ResolutionResult
from .scorer import (
    MAX_DATE_DIFF_DAYS,
    MAX_TIME_DIFF_SECONDS,
    SECONDS_PER_DAY,
    collect_candidates,
    is_exact_match,
    score_entry,
    seconds_since_midnight,
)

__all__ = [
    "MAX_DATE_DIFF_DAYS",
    "MAX_PAGES",
    "MAX_TIME_DIFF_SECONDS",
    "SECONDS_PER_DAY",
    "EntryResolver",
    "ResolutionResult",
    "collect_candidates",
    "is_exact_match",
    "score_entry",
    "seconds_since_midnight",
]
