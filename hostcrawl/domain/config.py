from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from hostcrawl.exceptions import InvalidConfigError

DEFAULT_CONCURRENCY_LIMIT = 200
DEFAULT_USER_AGENT = "HostCrawl/1.0"
DEFAULT_HTTP_TIMEOUT = 3.0


@dataclass(frozen=True)
class CrawlerConfig:
    """Settings for one crawl run.

    Values are validated on construction so a bad seed or budget fails
    before any network traffic happens.
    """

    seed_url: str
    max_pages: int
    concurrency_limit: int = DEFAULT_CONCURRENCY_LIMIT
    user_agent: str = DEFAULT_USER_AGENT
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    config_path: Optional[str] = None

    def __post_init__(self):
        seed = (self.seed_url or "").strip()
        try:
            parts = urlsplit(seed)
            parts.port
        except ValueError as e:
            raise InvalidConfigError("seed_url", f"cannot parse {self.seed_url!r}: {e}") from e
        if parts.scheme not in ("http", "https"):
            raise InvalidConfigError("seed_url", f"{self.seed_url!r} must start with http:// or https://")
        if not parts.hostname:
            raise InvalidConfigError("seed_url", f"{self.seed_url!r} has no host")
        object.__setattr__(self, "seed_url", seed)

        for name in ("max_pages", "concurrency_limit"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigError(name, f"expected an integer, got {value!r}")
            if value <= 0:
                raise InvalidConfigError(name, f"must be positive, got {value}")

        if not self.user_agent or not str(self.user_agent).strip():
            raise InvalidConfigError("user_agent", "must not be empty")
        try:
            timeout = float(self.http_timeout)
        except (TypeError, ValueError):
            raise InvalidConfigError("http_timeout", f"expected a number, got {self.http_timeout!r}") from None
        if timeout <= 0:
            raise InvalidConfigError("http_timeout", f"must be positive, got {self.http_timeout!r}")
        object.__setattr__(self, "http_timeout", timeout)

    def __repr__(self):
        return f"<CrawlerConfig seed={self.seed_url} max_pages={self.max_pages} concurrency={self.concurrency_limit}>"
