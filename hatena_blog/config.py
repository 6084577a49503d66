"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- BlogConfig: Hatena account, blog and API key settings
- HttpConfig: HTTP client settings
- SearchConfig: Date-based entry search bounds
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
import os
from typing import Any

import yaml

from .errors import ConfigurationError


@dataclass
class BlogConfig:
    """Configuration for the target blog.

    Attributes:
        hatena_id: Hatena user id, also used as the WSSE username
        blog_id: Blog domain (e.g., "example.hatenadiary.com")
        api_key: Optional inline API key (overrides env var)
        api_key_env: Environment variable name containing the API key
        api_base_url: Base URL of the AtomPub API
    """

    hatena_id: str = ""
    blog_id: str = ""
    api_key: str | None = None
    api_key_env: str = "HATENA_API_KEY"
    api_base_url: str = "https://blog.hatena.ne.jp"

    @property
    def endpoint(self) -> str:
        """Entry collection URL of the AtomPub API."""
        return f"{self.api_base_url.rstrip('/')}/{self.hatena_id}/{self.blog_id}/atom/entry"

    @property
    def blog_url(self) -> str:
        """Public base URL of the blog."""
        return f"https://{self.blog_id}"

    def edit_url(self, entry_id: str) -> str:
        """Return the browser edit page URL for an entry."""
        return f"{self.api_base_url.rstrip('/')}/{self.hatena_id}/{self.blog_id}/edit?entry={entry_id}"


@dataclass
class HttpConfig:
    """Configuration for the HTTP client.

    Attributes:
        timeout_seconds: Per-request timeout
        trust_env: Whether to respect system proxy settings
        user_agent: HTTP User-Agent header string
    """

    timeout_seconds: float = 30.0
    trust_env: bool = True
    user_agent: str = "hatena-blog-tools/0.1.0"


@dataclass
class SearchConfig:
    """Configuration for resolving date-based entry URLs.

    Attributes:
        max_pages: Hard cap on feed pages fetched per search
        max_date_diff_days: Candidates further away in calendar days are excluded
        max_time_diff_seconds: Candidates further away in time of day are excluded
        deadline_seconds: Optional wall-clock budget for one search
    """

    max_pages: int = 100
    max_date_diff_days: int = 7
    max_time_diff_seconds: int = 3600
    deadline_seconds: float | None = None


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to the console (stderr)
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the log file
        directory: Directory for the log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = False
    format: str = "jsonl"
    filename: str = "hatena_blog.jsonl"
    directory: str = "logs"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    blog: BlogConfig = field(default_factory=BlogConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")
    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update(value)
        else:
            data[key] = value
    return _fromdict(data)


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        blog=_section(BlogConfig, "blog", data["blog"]),
        http=_section(HttpConfig, "http", data["http"]),
        search=_section(SearchConfig, "search", data["search"]),
        logging=_section(LoggingConfig, "logging", data["logging"]),
    )


def _section(cls: type, name: str, values: Any) -> Any:
    if not isinstance(values, dict):
        raise ConfigurationError(f"Config section '{name}' must be a mapping")
    try:
        return cls(**values)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid config section '{name}': {exc}") from exc


def get_api_key(cfg: BlogConfig) -> str | None:
    """Get API key from inline config or environment variable."""
    if cfg.api_key:
        return cfg.api_key
    return os.getenv(cfg.api_key_env)
