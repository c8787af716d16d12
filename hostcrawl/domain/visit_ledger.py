import threading
from enum import Enum
from typing import FrozenSet, Set


class ClaimResult(Enum):
    CLAIMED = "claimed"
    DUPLICATE = "duplicate"
    BUDGET_EXHAUSTED = "budget_exhausted"


class VisitLedger:
    """
    Thread-safe record of claimed URLs with a fixed page budget.

    This is the single synchronization point that keeps a URL from being
    crawled twice and the crawl from exceeding ``max_pages``. The set never
    shrinks; a claimed URL stays claimed for the lifetime of the ledger.
    """

    def __init__(self, max_pages: int):
        if max_pages <= 0:
            raise ValueError("max_pages must be positive")
        self._max_pages = int(max_pages)
        self._lock = threading.Lock()
        self._claimed: Set[str] = set()

    @property
    def max_pages(self) -> int:
        return self._max_pages

    def claim(self, url: str) -> ClaimResult:
        """Atomically claim `url`, reporting why a refused claim was refused."""
        with self._lock:
            if url in self._claimed:
                return ClaimResult.DUPLICATE
            if len(self._claimed) >= self._max_pages:
                return ClaimResult.BUDGET_EXHAUSTED
            self._claimed.add(url)
            return ClaimResult.CLAIMED

    def try_claim(self, url: str) -> bool:
        return self.claim(url) is ClaimResult.CLAIMED

    def seed(self, url: str) -> bool:
        """Pre-claim the start URL. It counts toward the budget like any other claim."""
        return self.try_claim(url)

    def is_claimed(self, url: str) -> bool:
        with self._lock:
            return url in self._claimed

    @property
    def claimed_count(self) -> int:
        with self._lock:
            return len(self._claimed)

    def claimed_urls(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._claimed)
