"""
Match scoring of feed entries against a date-based search target.

Lower scores are better. An entry whose own URL contains the target's
/entry/YYYY/MM/DD/<digits> path scores 0 regardless of its timestamp.
Otherwise the score is the calendar-day distance in seconds plus the
time-of-day distance, and entries outside either tolerance are excluded.

Calendar dates and times of day are compared independently: 23:59:59 on
one day and 00:00:01 on the next are one day and 86398 seconds apart.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from ..core.types import Candidate, RawEntry, SearchTarget

SECONDS_PER_DAY = 86_400
MAX_DATE_DIFF_DAYS = 7
MAX_TIME_DIFF_SECONDS = 3600


def seconds_since_midnight(moment: datetime) -> int:
    """Seconds since midnight in the timestamp's own UTC offset."""
    return moment.hour * 3600 + moment.minute * 60 + moment.second


def is_exact_match(entry: RawEntry, target: SearchTarget) -> bool:
    return entry.alternate_url is not None and target.exact_path in entry.alternate_url


def score_entry(
    entry: RawEntry,
    target: SearchTarget,
    max_date_diff_days: int = MAX_DATE_DIFF_DAYS,
    max_time_diff_seconds: int = MAX_TIME_DIFF_SECONDS,
) -> int | None:
    """Score one entry against the target.

    Args:
        entry: Feed entry to score
        target: Decoded date-based reference
        max_date_diff_days: Largest admissible calendar-day distance
        max_time_diff_seconds: Largest admissible time-of-day distance

    Returns:
        Non-negative score, or None if the entry is excluded
    """
    if entry.published_at is None:
        return None

    if is_exact_match(entry, target):
        return 0

    date_diff = abs((entry.published_at.date() - target.date).days)
    if date_diff > max_date_diff_days:
        return None

    time_diff = abs(seconds_since_midnight(entry.published_at) - target.time_of_day)
    if time_diff > max_time_diff_seconds:
        return None

    return date_diff * SECONDS_PER_DAY + time_diff


def collect_candidates(
    entries: Iterable[RawEntry],
    target: SearchTarget,
    max_date_diff_days: int = MAX_DATE_DIFF_DAYS,
    max_time_diff_seconds: int = MAX_TIME_DIFF_SECONDS,
) -> list[Candidate]:
    """Score entries in order, keeping the admissible ones."""
    candidates: list[Candidate] = []
    for entry in entries:
        score = score_entry(entry, target, max_date_diff_days, max_time_diff_seconds)
        if score is None:
            continue
        entry_id = entry.entry_id
        if not entry_id:
            continue
        candidates.append(Candidate(entry_id=entry_id, score=score, title=entry.title or ""))
    return candidates
