"""Crawl result data model."""
from typing import FrozenSet, NamedTuple


class CrawlResult(NamedTuple):
    """Result of a crawl operation.

    Lets callers report totals without reaching into the crawl context.
    """
    pages_visited: int
    """Number of URLs claimed in the visit ledger, seed included"""

    pages_fetched: int
    """Number of pages whose fetch succeeded"""

    fetch_failures: int
    """Number of units that ended early because their fetch failed"""

    elapsed_seconds: float
    """Wall-clock time from seeding to drain"""

    visited_urls: FrozenSet[str] = frozenset()
