import threading
import time

import pytest

from softgl.logger import set_log_func
from softgl.threadpool import ThreadPool


def test_all_tasks_run_with_arguments():
    results = []
    with ThreadPool(4) as pool:
        for i in range(100):
            pool.push_task(lambda tid, x: results.append(x), i)
        pool.wait_tasks_finish()
        assert sorted(results) == list(range(100))


def test_thread_ids_within_range():
    ids = []
    with ThreadPool(3) as pool:
        assert pool.thread_count == 3
        for _ in range(30):
            pool.push_task(lambda tid: ids.append(tid))
        pool.wait_tasks_finish()
    assert len(ids) == 30
    assert all(0 <= t < 3 for t in ids)


def test_paused_pool_runs_nothing_until_resumed():
    results = []
    with ThreadPool(2) as pool:
        pool.paused = True
        pool.push_task(lambda tid: results.append(1))
        pool.wait_tasks_finish()
        time.sleep(0.05)
        assert results == []
        pool.paused = False
        pool.wait_tasks_finish()
        assert results == [1]


def test_close_waits_for_pending_tasks():
    done = []
    pool = ThreadPool(2)
    for i in range(6):
        pool.push_task(lambda tid, x: (time.sleep(0.01), done.append(x)), i)
    pool.close()
    assert sorted(done) == list(range(6))


def test_push_after_close_raises():
    pool = ThreadPool(1)
    pool.close()
    with pytest.raises(RuntimeError):
        pool.push_task(lambda tid: None)


def test_zero_threads_rejected():
    with pytest.raises(ValueError):
        ThreadPool(0)


def test_failing_task_does_not_stop_pool():
    messages = []
    lock = threading.Lock()

    def sink(level, text):
        with lock:
            messages.append(text)

    def boom(tid):
        raise RuntimeError("boom")

    results = []
    set_log_func(sink)
    try:
        with ThreadPool(1) as pool:
            pool.push_task(boom)
            pool.push_task(lambda tid: results.append("ok"))
            pool.wait_tasks_finish()
    finally:
        set_log_func(None)
    assert results == ["ok"]
    assert any("boom" in m for m in messages)