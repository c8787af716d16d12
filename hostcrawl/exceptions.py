"""Custom exceptions for HostCrawl."""
from typing import Optional


class LinkError(Exception):
    """Base class for hrefs that cannot become a crawlable URL."""

    def __init__(self, href: str, reason: str):
        self.href = href
        self.reason = reason
        super().__init__(f"Link {href!r} rejected: {reason}")


class InvalidLinkError(LinkError):
    """Raised for empty hrefs, pure fragments and mailto:/tel: pseudo-links."""


class MalformedUrlError(LinkError):
    """Raised when an href or its base URL cannot be parsed."""


class UnsupportedSchemeError(LinkError):
    """Raised when an href carries an explicit scheme other than http/https."""

    def __init__(self, href: str, scheme: str):
        self.scheme = scheme
        super().__init__(href, f"unsupported scheme {scheme!r}")


class FetchError(Exception):
    """Raised when a page fetch fails: transport error, timeout or non-success status."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None, original: Optional[Exception] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {reason}")


class RobotsUnavailableError(Exception):
    """Raised when robots.txt for a host cannot be retrieved."""

    def __init__(self, robots_url: str, reason: str):
        self.robots_url = robots_url
        self.reason = reason
        super().__init__(f"robots.txt unavailable at {robots_url}: {reason}")


class InvalidConfigError(Exception):
    """Raised when crawl settings are unusable (bad seed URL, non-positive budget)."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")
