"""
Hatena Blog tools - AtomPub client for fetching, updating and posting entries.

Entries can be referenced by id, by id-based URL, or by the date-based
URL shown in the browser (/entry/YYYY/MM/DD/HHMMSS). Date-based URLs
carry no id, so they are resolved by searching the entry feed for the
closest published entry.

Main entry point is the CLI via the `hatena-blog` command.

Example:
    $ hatena-blog fetch https://example.hatenadiary.com/entry/2024/01/01/123456
"""

__all__ = [
    "__version__",
    "AppConfig",
    "HatenaBlog",
    "load_config",
    "parse_search_target",
    "sign",
]
__version__ = "0.1.0"

from .auth.wsse import sign
from .blog import HatenaBlog
from .config import AppConfig, load_config
from .core.reference import parse_search_target
