"""
Authenticated HTTP access to the Hatena AtomPub API.

AtomPubClient wraps a single httpx.Client. Every call is signed with a
new WSSE credential; responses with an unexpected status raise
RemoteRequestError and network failures raise TransportError. No retries.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time

import httpx

from ..auth.wsse import Clock, RandomSource, WsseSigner
from ..config import AppConfig, get_api_key
from ..errors import RemoteRequestError, TransportError
from ..utils.logging import get_logger, log_event


ATOM_CONTENT_TYPE = "application/atom+xml"


@dataclass
class ApiResponse:
    """A completed, successful API response.

    Attributes:
        url: The URL that was requested
        status_code: HTTP status code
        text: Decoded response body
        content: Raw response body bytes
    """
    url: str
    status_code: int
    text: str
    content: bytes


class AtomPubClient:
    """WSSE-authenticated client for AtomPub requests."""

    def __init__(
        self,
        identity: str,
        secret: str | None,
        *,
        timeout: float = 30.0,
        trust_env: bool = True,
        user_agent: str | None = None,
        transport: httpx.BaseTransport | None = None,
        random_source: RandomSource | None = None,
        clock: Clock | None = None,
        logger: logging.Logger | None = None,
    ):
        self._signer = WsseSigner(identity, secret, random_source=random_source, clock=clock)
        headers = {"User-Agent": user_agent} if user_agent else None
        self._client = httpx.Client(
            timeout=timeout,
            headers=headers,
            follow_redirects=True,
            trust_env=trust_env,
            transport=transport,
        )
        self._logger = logger or get_logger("http")

    @classmethod
    def from_config(cls, cfg: AppConfig, **kwargs) -> "AtomPubClient":
        return cls(
            cfg.blog.hatena_id,
            get_api_key(cfg.blog),
            timeout=cfg.http.timeout_seconds,
            trust_env=cfg.http.trust_env,
            user_agent=cfg.http.user_agent,
            **kwargs,
        )

    def request(
        self,
        method: str,
        url: str,
        body: str | None = None,
        expected_status: int | None = None,
    ) -> ApiResponse:
        """Send one signed request.

        Args:
            method: HTTP method
            url: Absolute request URL
            body: Optional Atom XML request body
            expected_status: If set, only this status counts as success;
                otherwise any 2xx status does

        Returns:
            ApiResponse for a successful request

        Raises:
            TransportError: The request could not be completed
            RemoteRequestError: The server answered with another status
        """
        headers = {"X-WSSE": self._signer.header(), "Accept": ATOM_CONTENT_TYPE}
        content = None
        if body is not None:
            headers["Content-Type"] = ATOM_CONTENT_TYPE
            content = body.encode("utf-8")

        started = time.monotonic()
        try:
            resp = self._client.request(method, url, headers=headers, content=content)
        except httpx.HTTPError as exc:
            log_event(
                self._logger,
                "atompub_request_failed",
                level=logging.DEBUG,
                method=method,
                url=url,
                error=f"{type(exc).__name__}: {exc}",
            )
            raise TransportError(f"{method} {url} failed: {type(exc).__name__}: {exc}") from exc

        log_event(
            self._logger,
            "atompub_request",
            level=logging.DEBUG,
            method=method,
            url=url,
            status_code=resp.status_code,
            elapsed_ms=int((time.monotonic() - started) * 1000),
        )

        ok = resp.status_code == expected_status if expected_status else resp.is_success
        if not ok:
            raise RemoteRequestError(resp.status_code, resp.text, reason=resp.reason_phrase, url=url)
        return ApiResponse(url=url, status_code=resp.status_code, text=resp.text, content=resp.content)

    def get(self, url: str) -> ApiResponse:
        return self.request("GET", url)

    def put(self, url: str, body: str) -> ApiResponse:
        return self.request("PUT", url, body)

    def post(self, url: str, body: str, expected_status: int | None = 201) -> ApiResponse:
        return self.request("POST", url, body, expected_status=expected_status)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "AtomPubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
