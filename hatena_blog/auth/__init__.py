"""WSSE request signing."""

from .wsse import (
    NONCE_BYTES,
    Credential,
    WsseSigner,
    compute_digest,
    create_credential,
    format_created,
    format_header,
    sign,
)

__all__ = [
    "NONCE_BYTES",
    "Credential",
    "WsseSigner",
    "compute_digest",
    "create_credential",
    "format_created",
    "format_header",
    "sign",
]
