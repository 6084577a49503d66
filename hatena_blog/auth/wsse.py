"""
WSSE UsernameToken credentials for the Hatena AtomPub API.

Each request needs its own credential: a fresh 20-byte nonce and creation
time are hashed together with the API key, so a captured header cannot be
replayed. Nothing here caches a credential.

    PasswordDigest = Base64(SHA1(nonce + created + api_key))
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from datetime import datetime, timezone
import hashlib
import secrets
from typing import Callable

from ..errors import ConfigurationError


NONCE_BYTES = 20

RandomSource = Callable[[int], bytes]
Clock = Callable[[], datetime]


@dataclass(frozen=True)
class Credential:
    """A single-use WSSE credential.

    Attributes:
        nonce: Raw random bytes
        created: Creation time, ISO 8601 UTC with second precision
        digest: Base64 SHA-1 digest of nonce, created and secret
    """
    nonce: bytes
    created: str
    digest: str

    @property
    def nonce_b64(self) -> str:
        return base64.b64encode(self.nonce).decode("ascii")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_created(moment: datetime) -> str:
    """Format a timestamp as ISO 8601 UTC, e.g. 2024-01-01T03:34:56Z."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def compute_digest(nonce: bytes, created: str, secret: str) -> str:
    # Concatenate as bytes: the nonce is arbitrary binary and must not pass through text decoding.
    digest_input = nonce + created.encode("utf-8") + secret.encode("utf-8")
    return base64.b64encode(hashlib.sha1(digest_input).digest()).decode("ascii")


def create_credential(
    secret: str,
    random_source: RandomSource = secrets.token_bytes,
    clock: Clock = _utc_now,
) -> Credential:
    """Create a fresh credential.

    Args:
        secret: The shared API key
        random_source: Returns n cryptographically secure random bytes
        clock: Returns the current time

    Returns:
        A new Credential; call again for every request
    """
    nonce = random_source(NONCE_BYTES)
    created = format_created(clock())
    return Credential(nonce=nonce, created=created, digest=compute_digest(nonce, created, secret))


def format_header(identity: str, credential: Credential) -> str:
    """Assemble the X-WSSE header value."""
    return (
        f'UsernameToken Username="{identity}", '
        f'PasswordDigest="{credential.digest}", '
        f'Nonce="{credential.nonce_b64}", '
        f'Created="{credential.created}"'
    )


def sign(
    identity: str,
    secret: str,
    random_source: RandomSource = secrets.token_bytes,
    clock: Clock = _utc_now,
) -> str:
    """Build a new X-WSSE header value for one request."""
    return format_header(identity, create_credential(secret, random_source, clock))


class WsseSigner:
    """Signs requests for one Hatena identity.

    The secret is checked once here so a missing key fails before any
    network call is made.

    Raises:
        ConfigurationError: If the identity or secret is empty
    """

    def __init__(
        self,
        identity: str,
        secret: str | None,
        random_source: RandomSource | None = None,
        clock: Clock | None = None,
    ):
        if not secret:
            raise ConfigurationError(
                "API key is not set. Set HATENA_API_KEY or blog.api_key in the config file."
            )
        if not identity:
            raise ConfigurationError("Hatena id is not set. Set HATENA_ID or blog.hatena_id.")
        self.identity = identity
        self._secret = secret
        self._random_source = random_source or secrets.token_bytes
        self._clock = clock or _utc_now

    def header(self) -> str:
        return sign(self.identity, self._secret, self._random_source, self._clock)
