"""
Exception hierarchy for Hatena Blog AtomPub operations.

Every error raised by this package derives from HatenaBlogError so callers
can catch the whole family at once. None of these are retried internally;
the CLI layer translates them into messages and exit codes.
"""

from __future__ import annotations


class HatenaBlogError(Exception):
    """Base class for all errors raised by hatena_blog."""


class ConfigurationError(HatenaBlogError):
    """Required configuration (API key, hatena id, blog id) is missing."""


class InvalidReferenceError(HatenaBlogError, ValueError):
    """An entry URL or id could not be interpreted."""


class TransportError(HatenaBlogError):
    """The HTTP request could not be completed (network failure or timeout)."""


class DeadlineExceededError(TransportError):
    """The overall search deadline elapsed before pagination finished."""


class FeedParseError(HatenaBlogError):
    """A response body was not a well-formed Atom document."""


class RemoteRequestError(HatenaBlogError):
    """A completed request returned an unexpected status.

    Attributes:
        status_code: HTTP status code returned by the server
        body: Response body, verbatim
        reason: HTTP reason phrase, if any
        url: The request URL
    """

    def __init__(self, status_code: int, body: str, reason: str = "", url: str | None = None):
        self.status_code = status_code
        self.body = body
        self.reason = reason
        self.url = url
        message = f"API request failed: {status_code} {reason}".rstrip()
        if body:
            message = f"{message}\n{body}"
        super().__init__(message)


class NotFoundError(HatenaBlogError):
    """No entry matched the date-based reference after pagination ended."""

    def __init__(self, reference: str):
        self.reference = reference
        super().__init__(f"No entry found for the given date: {reference}")
