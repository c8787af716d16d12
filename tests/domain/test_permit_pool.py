import threading
import time

import pytest

from hostcrawl.domain.permit_pool import PermitPool


def test_permit_tracks_active_count():
    pool = PermitPool(2)
    with pool.permit():
        assert pool.active == 1
        with pool.permit():
            assert pool.active == 2
    assert pool.active == 0
    assert pool.peak == 2


def test_permit_released_on_error():
    pool = PermitPool(1)
    with pytest.raises(RuntimeError):
        with pool.permit():
            raise RuntimeError("boom")
    assert pool.active == 0
    # the permit is available again
    with pool.permit():
        pass


def test_rejects_non_positive_size():
    with pytest.raises(ValueError):
        PermitPool(0)


def test_active_never_exceeds_size():
    pool = PermitPool(3)

    def worker():
        with pool.permit():
            time.sleep(0.01)

    threads = [threading.Thread(target=worker) for _ in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert pool.peak <= 3
    assert pool.active == 0


def test_acquire_blocks_when_exhausted():
    pool = PermitPool(1)
    pool.acquire()
    acquired = threading.Event()

    def waiter():
        pool.acquire()
        acquired.set()
        pool.release()

    t = threading.Thread(target=waiter)
    t.start()
    assert not acquired.wait(0.1)
    pool.release()
    assert acquired.wait(2)
    t.join()
