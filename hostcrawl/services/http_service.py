import logging
from typing import Callable
from urllib.parse import urldefrag, urljoin

import requests
from requests.adapters import HTTPAdapter

from hostcrawl.domain.http_response import REDIRECT_STATUSES, HttpResponse
from hostcrawl.exceptions import FetchError
from hostcrawl.services.url_normalizer import host_key

logger = logging.getLogger(__name__)

MAX_REDIRECTS = 10


def build_session(user_agent: str, pool_connections: int = 200, pool_maxsize: int = 100) -> requests.Session:
    """Create a `requests.Session` that keeps idle connections open across fetches.

    `pool_connections` bounds how many hosts get a connection pool and
    `pool_maxsize` bounds the idle connections kept per host.
    """
    session = requests.Session()
    adapter = HTTPAdapter(pool_connections=pool_connections, pool_maxsize=pool_maxsize, max_retries=0)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.headers["User-Agent"] = user_agent
    return session


class HttpService:
    """
    HTTP client wrapper for fetching pages and robots.txt files.

    Requires http_client callable for dependency injection, usually the
    bound `get` of a pooled session from `build_session`.
    """

    def __init__(self, user_agent: str, http_client: Callable, timeout: float = 3.0):
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client

    def fetch(self, url: str, allow_redirects: bool = True) -> HttpResponse:
        """Fetch URL and return status code, body bytes and Content-Type.

        Transport errors and timeouts raise `FetchError`; any status code is returned.
        With `allow_redirects=False` a 3xx comes back as-is, with its Location.
        """
        headers = {"User-Agent": self.user_agent}
        try:
            resp = self.http_client(url, headers=headers, timeout=self.timeout, allow_redirects=allow_redirects)
        except requests.exceptions.RequestException as e:
            raise FetchError(url, str(e) or type(e).__name__, original=e) from e

        ct = None
        location = None
        if hasattr(resp, 'headers'):
            ct = resp.headers.get('Content-Type')
            if resp.status_code in REDIRECT_STATUSES:
                location = resp.headers.get('Location')

        return HttpResponse(resp.status_code, resp.content or b"", ct, location)

    def fetch_page(self, url: str) -> HttpResponse:
        """Fetch a page to crawl; non-success statuses also raise `FetchError`.

        Redirects are followed only while they stay on the page's host, so an
        off-host target is never requested. The returned `url` is where the
        body came from.
        """
        allowed_host = host_key(url)
        target = url
        for _ in range(MAX_REDIRECTS + 1):
            response = self.fetch(target, allow_redirects=False)
            if not response.is_redirect:
                break
            if not response.location:
                raise FetchError(url, f"status {response.status_code} without Location", status_code=response.status_code)
            next_url, _fragment = urldefrag(urljoin(target, response.location))
            try:
                next_host = host_key(next_url)
            except ValueError:
                raise FetchError(url, f"malformed redirect to {response.location!r}", status_code=response.status_code) from None
            if next_host != allowed_host:
                raise FetchError(url, f"redirected off-host to {next_url}", status_code=response.status_code)
            logger.debug("Following redirect %s -> %s", target, next_url)
            target = next_url
        else:
            raise FetchError(url, f"more than {MAX_REDIRECTS} redirects")

        if not response.ok:
            raise FetchError(url, f"status {response.status_code}", status_code=response.status_code)
        return response._replace(url=target)

    def fetch_robots(self, robots_url: str) -> HttpResponse:
        """Fetch robots.txt - delegates to fetch()."""
        return self.fetch(robots_url)
