"""
Parsing of user-supplied entry references.

A reference is either a bare entry id, an entry URL whose path after
/entry/ is the id, or a date-based URL (/entry/YYYY/MM/DD/HHMMSS) that
has to be resolved by searching the feed.
"""

from __future__ import annotations

from datetime import date
import re
from urllib.parse import urlparse

from ..errors import InvalidReferenceError
from .types import SearchTarget


DATE_URL_RE = re.compile(r"/entry/(\d{4})/(\d{2})/(\d{2})/(\d+)")
ENTRY_ID_RE = re.compile(r"\d+")


def is_entry_id(reference: str) -> bool:
    return ENTRY_ID_RE.fullmatch(reference) is not None


def is_date_based_reference(reference: str) -> bool:
    return DATE_URL_RE.search(reference) is not None


def parse_search_target(reference: str) -> SearchTarget:
    """Decode a date-based entry URL into a SearchTarget.

    The time digits are read as HHMMSS; shorter values are padded with
    zeros on the right ("1234" is 12:34:00) and digits past the sixth
    are ignored for the time of day.

    Args:
        reference: URL containing /entry/YYYY/MM/DD/<digits>

    Returns:
        SearchTarget keeping the raw digits for exact URL matching

    Raises:
        InvalidReferenceError: If the URL is not date-based or encodes an
            impossible date or time
    """
    match = DATE_URL_RE.search(reference)
    if match is None:
        raise InvalidReferenceError(f"Not a date-based entry URL: {reference}")

    year, month, day, digits = match.groups()
    try:
        target_date = date(int(year), int(month), int(day))
    except ValueError as exc:
        raise InvalidReferenceError(f"Invalid date in entry URL: {reference}") from exc

    padded = digits.ljust(6, "0")
    hours, minutes, seconds = int(padded[0:2]), int(padded[2:4]), int(padded[4:6])
    if hours > 23 or minutes > 59 or seconds > 59:
        raise InvalidReferenceError(f"Invalid time in entry URL: {reference}")

    return SearchTarget(
        date=target_date,
        time_of_day=hours * 3600 + minutes * 60 + seconds,
        raw_time_digits=digits,
    )


def extract_entry_id(url: str) -> str:
    """Return the path after the /entry/ segment of an entry URL.

    Examples:
        >>> extract_entry_id("https://example.hatenadiary.com/entry/20240101/1234567890")
        '20240101/1234567890'

    Raises:
        InvalidReferenceError: If the URL has no entry segment
    """
    path_parts = urlparse(url).path.split("/")
    if "entry" not in path_parts:
        raise InvalidReferenceError(f"Invalid entry URL: {url}")

    entry_index = path_parts.index("entry")
    entry_id = "/".join(path_parts[entry_index + 1:])
    if not entry_id:
        raise InvalidReferenceError(f"Invalid entry URL: {url}")
    return entry_id
