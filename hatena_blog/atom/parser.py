"""
Atom XML parsing for Hatena AtomPub responses.

Feed pages and single entry documents are parsed with ElementTree. Each
optional field is mapped to None here, once, so scoring and output code
work with plain typed values.
"""

from __future__ import annotations

from datetime import datetime, timezone
from xml.etree import ElementTree as ET

from ..core.types import BlogEntry, FeedPage, RawEntry, entry_id_from_tag
from ..errors import FeedParseError


ATOM_NS = "http://www.w3.org/2005/Atom"
APP_NS = "http://www.w3.org/2007/app"


def parse_feed_page(xml: str | bytes, fallback_blog_url: str | None = None) -> FeedPage:
    """Parse one page of the entry collection feed.

    Args:
        xml: Feed document
        fallback_blog_url: Base URL used to derive an entry URL from its id
            when the entry has no alternate link

    Returns:
        FeedPage with entries in document order and the rel="next" URL

    Raises:
        FeedParseError: If the document is not well-formed XML
    """
    root = _parse_root(xml)
    entries = []
    for element in _children(root, "entry"):
        raw = _parse_raw_entry(element, fallback_blog_url)
        if raw is not None:
            entries.append(raw)
    return FeedPage(entries=tuple(entries), next_page_url=_link_href(root, "next"))


def parse_entry_document(xml: str | bytes, fallback_blog_url: str | None = None) -> BlogEntry:
    """Parse a single-entry document as returned by GET/PUT/POST on an entry."""
    entry = _parse_root(xml)
    entry_id = entry_id_from_tag(_child_text(entry, "id"))
    content = _child_text(entry, "content")
    return BlogEntry(
        entry_id=entry_id,
        title=_child_text(entry, "title"),
        content=content.rstrip() if content is not None else None,
        published_at=parse_timestamp(_child_text(entry, "published")),
        url=_entry_url(entry, entry_id, fallback_blog_url),
        draft=_draft_flag(entry),
        categories=[
            term for term in (el.get("term") for el in _children(entry, "category")) if term
        ],
    )


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an Atom date-time, keeping its UTC offset; None if unparsable."""
    if not value:
        return None
    raw = value.strip()
    if raw.endswith("Z"):
        raw = f"{raw[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_root(xml: str | bytes) -> ET.Element:
    try:
        return ET.fromstring(xml)
    except ET.ParseError as exc:
        raise FeedParseError(f"Malformed Atom document: {exc}") from exc


def _parse_raw_entry(element: ET.Element, fallback_blog_url: str | None) -> RawEntry | None:
    tag = _child_text(element, "id")
    if not tag:
        return None
    return RawEntry(
        id=tag,
        published_at=parse_timestamp(_child_text(element, "published")),
        alternate_url=_entry_url(element, entry_id_from_tag(tag), fallback_blog_url),
        title=_child_text(element, "title"),
    )


def _entry_url(element: ET.Element, entry_id: str | None, fallback_blog_url: str | None) -> str | None:
    href = _link_href(element, "alternate")
    if href:
        return href
    if entry_id and fallback_blog_url:
        return f"{fallback_blog_url.rstrip('/')}/entry/{entry_id}"
    return None


def _draft_flag(entry: ET.Element) -> bool | None:
    control = entry.find(f"{{{APP_NS}}}control")
    if control is None:
        return None
    draft = control.find(f"{{{APP_NS}}}draft")
    if draft is None or draft.text is None:
        return None
    return draft.text.strip().lower() == "yes"


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    found = element.findall(f"{{{ATOM_NS}}}{name}")
    if found:
        return found
    # Documents without the Atom namespace
    return element.findall(name)


def _child_text(element: ET.Element, name: str) -> str | None:
    for child in _children(element, name):
        return child.text
    return None


def _link_href(element: ET.Element, rel: str) -> str | None:
    for link in _children(element, "link"):
        if link.get("rel") == rel and link.get("href"):
            return link.get("href")
    return None
