import threading
from typing import Optional

from hostcrawl.domain.config import CrawlerConfig
from hostcrawl.domain.permit_pool import PermitPool
from hostcrawl.domain.visit_ledger import VisitLedger
from hostcrawl.services.robots_cache import RobotsCache


class CrawlContext:
    """Shared handles for one crawl run.

    Every unit of work receives the same context; nothing crawl-wide lives
    in module globals, so several crawls can run side by side. The robots
    cache lives here too, so each run fetches a host's policy afresh.
    """

    def __init__(self, config: CrawlerConfig, seed_url: str, allowed_host: str,
                 ledger: Optional[VisitLedger] = None, permits: Optional[PermitPool] = None, tasks=None,
                 robots_cache: Optional[RobotsCache] = None):
        self.config = config
        self.seed_url = seed_url
        self.allowed_host = allowed_host
        self.ledger = ledger if ledger is not None else VisitLedger(config.max_pages)
        self.permits = permits if permits is not None else PermitPool(config.concurrency_limit)
        self.tasks = tasks
        self.robots_cache = robots_cache if robots_cache is not None else RobotsCache()
        self._stats_lock = threading.Lock()
        self.pages_fetched = 0
        self.fetch_failures = 0

    def record_fetch(self, ok: bool) -> None:
        with self._stats_lock:
            if ok:
                self.pages_fetched += 1
            else:
                self.fetch_failures += 1
