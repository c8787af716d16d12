import threading
from typing import Callable, Dict, Optional


class RobotsCache:
    """
    Thread-safe cache of raw robots.txt text keyed by host.

    Entries are written once and never evicted; a crawl is bounded and
    short-lived. `get_or_load` serializes first access per host so the
    loader runs at most once for each host.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._cache: Dict[str, str] = {}
        self._host_locks: Dict[str, threading.Lock] = {}

    def get(self, host: str) -> Optional[str]:
        """Get cached policy text for a host, or None if not cached."""
        with self._lock:
            return self._cache.get(host)

    def set(self, host: str, policy_text: str) -> None:
        """Cache policy text for a host. The first stored value wins."""
        with self._lock:
            self._cache.setdefault(host, policy_text)

    def get_or_load(self, host: str, loader: Callable[[], str]) -> str:
        with self._lock:
            if host in self._cache:
                return self._cache[host]
            host_lock = self._host_locks.setdefault(host, threading.Lock())

        with host_lock:
            cached = self.get(host)
            if cached is not None:
                return cached
            text = loader()
            self.set(host, text)
            return self.get(host)

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, host: str) -> bool:
        with self._lock:
            return host in self._cache
