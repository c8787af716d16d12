import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable

logger = logging.getLogger(__name__)


class TaskGroup:
    """Spawn tasks on a thread pool and wait until every spawned task is done.

    Tasks may spawn further tasks into the same group; `wait()` returns once
    the whole transitive closure has finished. A task that raises is logged
    and counted as finished; it never affects its siblings.
    """

    def __init__(self, max_workers: int, thread_name_prefix: str = "crawl"):
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix=thread_name_prefix)
        self._cond = threading.Condition()
        self._outstanding = 0
        self._spawned = 0
        self._failed = 0

    def spawn(self, fn: Callable, *args) -> Future:
        with self._cond:
            self._outstanding += 1
            self._spawned += 1
        try:
            future = self._executor.submit(fn, *args)
        except Exception:
            self._finished(failed=True)
            raise
        future.add_done_callback(self._on_done)
        return future

    def _on_done(self, future: Future) -> None:
        exc = future.exception()
        if exc is not None:
            logger.error("Crawl task failed: %s", exc, exc_info=(type(exc), exc, exc.__traceback__))
        self._finished(failed=exc is not None)

    def _finished(self, failed: bool) -> None:
        with self._cond:
            self._outstanding -= 1
            if failed:
                self._failed += 1
            if self._outstanding == 0:
                self._cond.notify_all()

    def wait(self) -> None:
        """Block until no spawned task is pending or running."""
        with self._cond:
            while self._outstanding > 0:
                self._cond.wait()

    def shutdown(self) -> None:
        self._executor.shutdown(wait=True)

    @property
    def spawned(self) -> int:
        with self._cond:
            return self._spawned

    @property
    def failed(self) -> int:
        with self._cond:
            return self._failed

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.wait()
        self.shutdown()
