import threading
import time

import pytest

from clipfetch.pool import WaitGroupPool


def _run_tasks(pool, count, work):
    for _ in range(count):
        pool.add()

        def task():
            try:
                work()
            finally:
                pool.done()

        threading.Thread(target=task).start()
    return pool.wait()


def test_wait_group_pool_counts_all():
    pool = WaitGroupPool(10)
    lock = threading.Lock()
    total = [0]

    def work():
        with lock:
            total[0] += 1

    result = _run_tasks(pool, 100, work)
    assert result is None
    assert total[0] == 100


def test_concurrency_is_limited():
    pool = WaitGroupPool(10)
    lock = threading.Lock()
    active = [0]
    peak = [0]

    def work():
        with lock:
            active[0] += 1
            peak[0] = max(peak[0], active[0])
        time.sleep(0.005)
        with lock:
            active[0] -= 1

    result = _run_tasks(pool, 60, work)
    assert result is None
    assert 1 <= peak[0] <= 10
    assert active[0] == 0


def test_unbounded_pool_never_blocks_add():
    pool = WaitGroupPool(0)
    added = [pool.add() for _ in range(50)]
    finished = [pool.done() for _ in range(50)]
    assert added == [None] * 50
    assert finished == [None] * 50
    assert pool.wait() is None


def test_done_without_add_raises():
    pool = WaitGroupPool(2)
    with pytest.raises(ValueError):
        pool.done()