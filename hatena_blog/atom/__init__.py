"""
Atom document handling.

Parsing of feed pages and entry documents, and construction of
entry documents for the post and update requests.
"""

from .builder import build_entry_xml
from .parser import (
    APP_NS,
    ATOM_NS,
    parse_entry_document,
    parse_feed_page,
    parse_timestamp,
)

__all__ = [
    "APP_NS",
    "ATOM_NS",
    "build_entry_xml",
    "parse_entry_document",
    "parse_feed_page",
    "parse_timestamp",
]
