"""Terminal rendering of entries and publish results."""

from .renderer import OutputMode, format_published, render_entry, render_publish_result

__all__ = ["OutputMode", "format_published", "render_entry", "render_publish_result"]
