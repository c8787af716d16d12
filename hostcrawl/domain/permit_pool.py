import threading
from contextlib import contextmanager


class PermitPool:
    """Fixed-size pool of concurrency permits.

    Wraps a bounded semaphore and tracks how many permits are held right now
    and the highest number ever held at once.
    """

    def __init__(self, size: int):
        if size <= 0:
            raise ValueError("permit pool size must be positive")
        self._size = int(size)
        self._semaphore = threading.BoundedSemaphore(self._size)
        self._lock = threading.Lock()
        self._active = 0
        self._peak = 0

    @property
    def size(self) -> int:
        return self._size

    @property
    def active(self) -> int:
        with self._lock:
            return self._active

    @property
    def peak(self) -> int:
        with self._lock:
            return self._peak

    def acquire(self) -> None:
        """Block until a permit is free, then take it."""
        self._semaphore.acquire()
        with self._lock:
            self._active += 1
            if self._active > self._peak:
                self._peak = self._active

    def release(self) -> None:
        with self._lock:
            self._active -= 1
        self._semaphore.release()

    @contextmanager
    def permit(self):
        self.acquire()
        try:
            yield
        finally:
            self.release()
