from urllib.parse import SplitResult, urldefrag, urljoin, urlsplit, urlunsplit

from hostcrawl.exceptions import InvalidLinkError, MalformedUrlError, UnsupportedSchemeError

CRAWLABLE_SCHEMES = ("http", "https")
_PSEUDO_SCHEMES = ("mailto:", "tel:")


def _split(value: str, href: str) -> SplitResult:
    try:
        parts = urlsplit(value)
        # port parsing is lazy in urllib; force it so bad ports fail here
        parts.port
    except ValueError as e:
        raise MalformedUrlError(href, str(e)) from e
    return parts


def normalize_link(base_url: str, href: str) -> str:
    """Resolve `href` against `base_url` into a canonical absolute URL.

    The result is absolute, http/https only and carries no fragment.
    Raises a `LinkError` subclass when the href cannot be crawled.
    """
    if href is None:
        raise InvalidLinkError("", "empty href")
    href = href.strip()
    if not href:
        raise InvalidLinkError(href, "empty href")
    if href.startswith("#"):
        raise InvalidLinkError(href, "fragment-only href")
    if href.lower().startswith(_PSEUDO_SCHEMES):
        raise InvalidLinkError(href, "mailto/tel pseudo-link")

    _split(base_url, href)
    ref = _split(href, href)
    if ref.scheme and ref.scheme not in CRAWLABLE_SCHEMES:
        raise UnsupportedSchemeError(href, ref.scheme)

    resolved, _fragment = urldefrag(urljoin(base_url, href))
    if urlsplit(resolved).scheme not in CRAWLABLE_SCHEMES:
        raise UnsupportedSchemeError(href, urlsplit(resolved).scheme)
    return resolved


def canonical_seed(seed_url: str) -> str:
    """Canonical form of the start URL: fragment stripped, empty path becomes '/'."""
    url = normalize_link(seed_url, seed_url)
    parts = urlsplit(url)
    if not parts.path:
        url = urlunsplit(parts._replace(path="/"))
    return url


def host_key(url: str) -> str:
    """Lowercase host plus explicit port, used to compare URLs for the host filter."""
    parts = urlsplit(url)
    host = (parts.hostname or "").lower()
    if ":" in host:
        host = f"[{host}]"
    port = parts.port
    return f"{host}:{port}" if port is not None else host
