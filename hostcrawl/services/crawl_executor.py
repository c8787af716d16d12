import logging
import time
from typing import Callable, Optional

from hostcrawl.domain.config import CrawlerConfig
from hostcrawl.domain.crawl_context import CrawlContext
from hostcrawl.domain.crawl_result import CrawlResult
from hostcrawl.domain.crawl_unit import CrawlUnit, UnitState
from hostcrawl.domain.permit_pool import PermitPool
from hostcrawl.domain.visit_ledger import VisitLedger
from hostcrawl.exceptions import FetchError
from hostcrawl.services.link_extractor import extract_hrefs
from hostcrawl.services.link_processor import LinkProcessor
from hostcrawl.services.robots_cache import RobotsCache
from hostcrawl.services.task_group import TaskGroup
from hostcrawl.services.url_normalizer import canonical_seed, host_key

logger = logging.getLogger(__name__)


class CrawlExecutor:
    """Executes a crawl given configured collaborators.

    This class owns the crawl control-flow: seeding, spawning one unit of
    work per claimed URL, and waiting for all of them to finish. It does
    NOT construct the transport or robots gate (that stays in the DI layer).
    """

    def __init__(
        self,
        *,
        http_service,
        link_processor: LinkProcessor,
        extract_links_fn: Callable = extract_hrefs,
        on_visit: Optional[Callable[[str], None]] = None,
    ):
        self.http_service = http_service
        self.link_processor = link_processor
        self.extract_links_fn = extract_links_fn
        self.on_visit = on_visit

    def new_context(self, config: CrawlerConfig, tasks: Optional[TaskGroup] = None) -> CrawlContext:
        seed = canonical_seed(config.seed_url)
        return CrawlContext(
            config,
            seed_url=seed,
            allowed_host=host_key(seed),
            ledger=VisitLedger(config.max_pages),
            permits=PermitPool(config.concurrency_limit),
            tasks=tasks,
            robots_cache=RobotsCache(),
        )

    def crawl(self, config: CrawlerConfig) -> CrawlResult:
        if config is None:
            raise ValueError("config is required for crawl")

        start = time.monotonic()
        with TaskGroup(max_workers=config.concurrency_limit) as tasks:
            context = self.new_context(config, tasks)
            logger.info("Starting crawl of %s (max_pages=%s, concurrency=%s)",
                        context.seed_url, config.max_pages, config.concurrency_limit)
            context.ledger.seed(context.seed_url)
            tasks.spawn(self.run_unit, CrawlUnit(context.seed_url), context)
            tasks.wait()
        elapsed = time.monotonic() - start

        result = CrawlResult(
            pages_visited=context.ledger.claimed_count,
            pages_fetched=context.pages_fetched,
            fetch_failures=context.fetch_failures,
            elapsed_seconds=elapsed,
            visited_urls=context.ledger.claimed_urls(),
        )
        logger.info("Crawling took %.2fs", elapsed)
        logger.info("Total pages crawled: %d (fetched %d, failed %d)",
                    result.pages_visited, result.pages_fetched, result.fetch_failures)
        return result

    def run_unit(self, unit: CrawlUnit, context: CrawlContext) -> CrawlUnit:
        """Drive one claimed URL from PENDING to DONE.

        The permit is held for fetch+extract+dispatch only; spawned children
        take their own permits and this unit never waits for them.
        """
        with context.permits.permit():
            unit.advance(UnitState.FETCHING)
            if self.on_visit is not None:
                self.on_visit(unit.url)

            try:
                response = self.http_service.fetch_page(unit.url)
            except FetchError as e:
                logger.warning("Fetch failed for %s: %s", unit.url, e.reason)
                context.record_fetch(ok=False)
                unit.fail(e)
                return unit
            context.record_fetch(ok=True)
            logger.debug("Fetched %s -> status %s", unit.url, response.status_code)

            unit.advance(UnitState.EXTRACTING)
            base_url = response.url or unit.url
            hrefs = self.extract_links_fn(response.content)

            unit.advance(UnitState.DISPATCHING)
            for href in hrefs:
                outcome = self.link_processor.process(base_url, href, context)
                if not outcome.accepted:
                    logger.debug("Skipping %r from %s: %s", href, unit.url, outcome.reason.value)
                    continue
                context.tasks.spawn(self.run_unit, CrawlUnit(outcome.url), context)
                unit.dispatched += 1

            unit.advance(UnitState.DONE)
        return unit
