"""
Resolution of date-based entry URLs to entry ids.

The resolver walks the entry feed page by page, starting at the
collection endpoint and following rel="next" links, and scores every
entry against the target. It stops as soon as a candidate scores 0
(an exact URL match or the exact published instant); otherwise it
picks the lowest score once pagination ends. Ties go to the candidate
seen first.

Any fetch failure aborts the search; there are no partial results.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import TYPE_CHECKING, Callable

from ..core.types import BlogEntry, Candidate, SearchTarget
from ..errors import ConfigurationError, DeadlineExceededError, NotFoundError
from ..fetch.pages import FeedPageSource
from ..utils.logging import get_logger, log_event
from .scorer import MAX_DATE_DIFF_DAYS, MAX_TIME_DIFF_SECONDS, collect_candidates

if TYPE_CHECKING:
    from ..entries.fetcher import EntryFetcher

MAX_PAGES = 100


@dataclass
class ResolutionResult:
    """Outcome of a successful search.

    Attributes:
        entry_id: Id of the chosen entry
        score: Score of the chosen entry (0 for an exact URL match)
        exact: Whether the search stopped on a score-0 candidate
        pages_fetched: Number of feed pages requested
        candidates_seen: Number of admissible candidates collected
    """
    entry_id: str
    score: int
    exact: bool
    pages_fetched: int
    candidates_seen: int


class EntryResolver:
    """Finds the entry a date-based URL refers to."""

    def __init__(
        self,
        pages: FeedPageSource,
        fetcher: EntryFetcher | None = None,
        *,
        max_pages: int = MAX_PAGES,
        max_date_diff_days: int = MAX_DATE_DIFF_DAYS,
        max_time_diff_seconds: int = MAX_TIME_DIFF_SECONDS,
        deadline_seconds: float | None = None,
        clock: Callable[[], float] = time.monotonic,
        logger: logging.Logger | None = None,
    ):
        self._pages = pages
        self._fetcher = fetcher
        self.max_pages = max_pages
        self.max_date_diff_days = max_date_diff_days
        self.max_time_diff_seconds = max_time_diff_seconds
        self.deadline_seconds = deadline_seconds
        self._clock = clock
        self._logger = logger or get_logger("search")

    def search(self, target: SearchTarget) -> ResolutionResult:
        """Walk the feed and return the best candidate with search details.

        Raises:
            NotFoundError: No admissible candidate on any fetched page
            DeadlineExceededError: The deadline elapsed before the next fetch
            TransportError, RemoteRequestError, FeedParseError: From page fetches
        """
        candidates: list[Candidate] = []
        started = self._clock()
        page_count = 0
        next_url: str | None = None

        while True:
            if page_count:
                self._check_deadline(started, next_url)
                log_event(self._logger, "feed_next_page", url=next_url, page=page_count + 1)
                page = self._pages.fetch_page(next_url)
            else:
                page = self._pages.fetch_first_page()
            page_count += 1

            candidates.extend(
                collect_candidates(
                    page.entries, target, self.max_date_diff_days, self.max_time_diff_seconds
                )
            )
            exact = next((c for c in candidates if c.score == 0), None)
            if exact is not None:
                return self._found(exact, True, page_count, len(candidates))

            next_url = page.next_page_url
            if not next_url or page_count >= self.max_pages:
                break

        if not candidates:
            log_event(
                self._logger,
                "entry_not_found",
                target=target.exact_path,
                pages_fetched=page_count,
            )
            raise NotFoundError(target.exact_path)

        # min() keeps the first of equal scores
        best = min(candidates, key=lambda c: c.score)
        return self._found(best, False, page_count, len(candidates))

    def resolve(self, target: SearchTarget) -> str:
        """Return the entry id that best matches the target."""
        return self.search(target).entry_id

    def resolve_and_fetch(self, target: SearchTarget) -> BlogEntry:
        """Resolve the target and fetch the full entry.

        The returned entry carries the target's apparent date and time.
        """
        if self._fetcher is None:
            raise ConfigurationError("EntryResolver has no entry fetcher configured")
        entry = self._fetcher.fetch(self.resolve(target))
        entry.apparent_datetime = target.apparent_datetime
        return entry

    def _check_deadline(self, started: float, next_url: str | None) -> None:
        if self.deadline_seconds is None:
            return
        elapsed = self._clock() - started
        if elapsed >= self.deadline_seconds:
            raise DeadlineExceededError(
                f"Search deadline of {self.deadline_seconds}s exceeded before fetching {next_url}"
            )

    def _found(self, candidate: Candidate, exact: bool, pages: int, seen: int) -> ResolutionResult:
        log_event(
            self._logger,
            "entry_resolved",
            entry_id=candidate.entry_id,
            score=candidate.score,
            exact=exact,
            pages_fetched=pages,
        )
        return ResolutionResult(
            entry_id=candidate.entry_id,
            score=candidate.score,
            exact=exact,
            pages_fetched=pages,
            candidates_seen=seen,
        )
