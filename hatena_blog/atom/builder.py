"""Atom entry documents for posting and updating."""

from __future__ import annotations

from datetime import datetime, timezone
from xml.etree import ElementTree as ET

from ..auth.wsse import format_created
from .parser import APP_NS, ATOM_NS

MARKDOWN_CONTENT_TYPE = "text/x-markdown"

ET.register_namespace("", ATOM_NS)
ET.register_namespace("app", APP_NS)


def build_entry_xml(
    title: str,
    content: str,
    draft: bool,
    author: str,
    updated: datetime | None = None,
) -> str:
    """Build an Atom entry with a Markdown body and app:draft control.

    Args:
        title: Entry title
        content: Markdown body
        draft: Whether the entry should be saved as a draft
        author: Author name (the Hatena id)
        updated: Update timestamp, defaults to now

    Returns:
        XML document as a string with an XML declaration
    """
    entry = ET.Element(f"{{{ATOM_NS}}}entry")
    ET.SubElement(entry, f"{{{ATOM_NS}}}title").text = title

    author_element = ET.SubElement(entry, f"{{{ATOM_NS}}}author")
    ET.SubElement(author_element, f"{{{ATOM_NS}}}name").text = author

    content_element = ET.SubElement(entry, f"{{{ATOM_NS}}}content", {"type": MARKDOWN_CONTENT_TYPE})
    content_element.text = content

    ET.SubElement(entry, f"{{{ATOM_NS}}}updated").text = format_created(
        updated or datetime.now(timezone.utc)
    )

    control = ET.SubElement(entry, f"{{{APP_NS}}}control")
    ET.SubElement(control, f"{{{APP_NS}}}draft").text = "yes" if draft else "no"

    body = ET.tostring(entry, encoding="unicode")
    return f'<?xml version="1.0" encoding="utf-8"?>\n{body}'
