import logging
from typing import Callable, Optional
from urllib.parse import urlsplit

from hostcrawl.exceptions import RobotsUnavailableError
from hostcrawl.services.robots_cache import RobotsCache
from hostcrawl.services.robots_fetcher import RobotsFetcher
from hostcrawl.services.robots_policy import agent_allowed
from hostcrawl.services.url_normalizer import host_key

logger = logging.getLogger(__name__)


class RobotsService:
    """
    Service for checking robots.txt permissions.

    Orchestrates fetching, caching, and evaluation of robots.txt policy text.
    A host whose robots.txt cannot be fetched is treated as unrestricted.

    Policy text is cached by `host_key`, the same key the host filter uses.
    Callers that run a crawl pass the crawl's own cache; without one the
    service falls back to its private cache.
    """

    def __init__(self, robots_fetcher: RobotsFetcher, user_agent: str,
                 cache: Optional[RobotsCache] = None,
                 evaluator: Callable[[str, str, str], bool] = agent_allowed):
        self.robots_fetcher = robots_fetcher
        self.user_agent = user_agent
        self.cache = cache if cache is not None else RobotsCache()
        self.evaluator = evaluator

    def policy_text(self, scheme: str, host: str, cache: Optional[RobotsCache] = None) -> str:
        robots_url = f"{scheme}://{host}/robots.txt"
        cache = cache if cache is not None else self.cache

        def load() -> str:
            try:
                text = self.robots_fetcher.fetch(robots_url)
            except RobotsUnavailableError as e:
                logger.warning("No usable robots.txt for %s (%s); treating host as unrestricted", host, e.reason)
                return ""
            logger.debug("Loaded robots.txt for %s (%d bytes)", host, len(text))
            return text

        return cache.get_or_load(host, load)

    def allowed_by_robots(self, url: str, user_agent: str, cache: Optional[RobotsCache] = None) -> bool:
        try:
            parsed = urlsplit(url)
            host = host_key(url)
        except ValueError:
            # Fail open: unparseable URLs never reach the network anyway.
            return True
        if not parsed.scheme or not host:
            return True

        text = self.policy_text(parsed.scheme.lower(), host, cache)
        try:
            return self.evaluator(text, user_agent, url)
        except Exception:
            logger.exception("Error checking robots permission for %s", url)
            return True

    def is_allowed(self, url: str, cache: Optional[RobotsCache] = None) -> bool:
        return self.allowed_by_robots(url, self.user_agent, cache)
