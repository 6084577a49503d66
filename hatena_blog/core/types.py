"""
Core data types for Hatena Blog entry lookup and publishing.

This module defines the data structures shared across the package:
- SearchTarget: Date/time decoded from a date-based entry URL
- RawEntry: One entry as listed in an Atom feed page
- FeedPage: One page of the entry collection feed
- Candidate: A feed entry admitted by the scorer, with its score
- BlogEntry: A fully fetched entry
- PublishResult: Outcome of posting or updating an entry
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class SearchTarget:
    """Date and time of day encoded in a date-based entry URL.

    Attributes:
        date: Calendar date from the /YYYY/MM/DD/ path segments
        time_of_day: Seconds since midnight decoded from the time digits
        raw_time_digits: The time digits exactly as they appeared in the URL
    """
    date: date
    time_of_day: int
    raw_time_digits: str

    @property
    def exact_path(self) -> str:
        """Path fragment that an entry's own URL contains on an exact match."""
        return f"/entry/{self.date:%Y/%m/%d}/{self.raw_time_digits}"

    @property
    def apparent_datetime(self) -> datetime:
        """The date and time the URL appears to encode (no timezone)."""
        hours, remainder = divmod(self.time_of_day, 3600)
        minutes, seconds = divmod(remainder, 60)
        return datetime(self.date.year, self.date.month, self.date.day, hours, minutes, seconds)


@dataclass(frozen=True)
class RawEntry:
    """A single entry element from a feed page.

    Optional fields are resolved once at the parse boundary: absent or
    unparsable values are None.

    Attributes:
        id: The Atom id (a tag URI)
        published_at: Publication timestamp with its original UTC offset
        alternate_url: Public URL of the entry (or a URL derived from its id)
        title: Entry title
    """
    id: str
    published_at: datetime | None = None
    alternate_url: str | None = None
    title: str | None = None

    @property
    def entry_id(self) -> str | None:
        """Entry identifier: the trailing '-'-delimited segment of the Atom id."""
        return entry_id_from_tag(self.id)


@dataclass(frozen=True)
class FeedPage:
    """One page of the entry collection feed.

    Attributes:
        entries: Entries in document order
        next_page_url: URL of the following page, None on the last page
    """
    entries: tuple[RawEntry, ...] = ()
    next_page_url: str | None = None


@dataclass(frozen=True)
class Candidate:
    """A feed entry admitted as a possible match for a SearchTarget."""
    entry_id: str
    score: int
    title: str = ""


@dataclass
class BlogEntry:
    """A fully fetched blog entry.

    Attributes:
        entry_id: Entry identifier
        title: Entry title, None if missing
        content: Markdown body with trailing whitespace removed, None if missing
        published_at: Publication timestamp, None if missing
        url: Public URL of the entry
        draft: Whether the entry is a draft, None if not reported
        categories: Category labels in document order
        apparent_datetime: Date/time encoded in the URL used to find the entry
    """
    entry_id: str | None
    title: str | None = None
    content: str | None = None
    published_at: datetime | None = None
    url: str | None = None
    draft: bool | None = None
    categories: list[str] = field(default_factory=list)
    apparent_datetime: datetime | None = None


@dataclass
class PublishResult:
    """Result of posting or updating an entry."""
    entry_id: str | None
    title: str | None
    url: str | None
    edit_url: str | None
    published: str | None
    draft: bool


def entry_id_from_tag(tag_uri: str | None) -> str | None:
    """Extract the entry identifier from an Atom id.

    Examples:
        >>> entry_id_from_tag("tag:blog.hatena.ne.jp,2013:blog-user-1768-1357")
        '1357'
    """
    if not tag_uri:
        return None
    entry_id = tag_uri.strip().split("-")[-1]
    return entry_id or None
