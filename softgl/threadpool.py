"""A fixed-size pool of worker threads consuming a FIFO task queue."""

from __future__ import annotations

import os
import threading
from collections import deque
from typing import Any, Callable, Deque, List, Optional, Tuple

from softgl.logger import LogLevel, log

Task = Callable[..., Any]


class ThreadPool:
    """Runs queued tasks on worker threads.

    Each task is called as ``task(thread_id, *args)``. While ``paused`` is set,
    workers take no new tasks from the queue.
    """

    def __init__(self, thread_count: Optional[int] = None) -> None:
        if thread_count is None:
            thread_count = os.cpu_count() or 1
        if thread_count < 1:
            raise ValueError("thread pool needs at least one thread")
        self._thread_count = thread_count
        self._cond = threading.Condition()
        self._tasks: Deque[Tuple[Task, Tuple[Any, ...]]] = deque()
        self._tasks_count = 0
        self._running = True
        self._closed = False
        self._paused = False
        self._threads: List[threading.Thread] = [
            threading.Thread(target=self._worker, args=(i,), name=f"softgl-worker-{i}", daemon=True)
            for i in range(thread_count)
        ]
        for thread in self._threads:
            thread.start()

    @property
    def thread_count(self) -> int:
        return self._thread_count

    @property
    def paused(self) -> bool:
        return self._paused

    @paused.setter
    def paused(self, value: bool) -> None:
        with self._cond:
            self._paused = bool(value)
            self._cond.notify_all()

    def push_task(self, task: Task, *args: Any) -> None:
        """Queue ``task`` to be called as ``task(thread_id, *args)``."""
        with self._cond:
            if not self._running:
                raise RuntimeError("thread pool is closed")
            self._tasks.append((task, args))
            self._tasks_count += 1
            self._cond.notify()

    def _finished(self) -> bool:
        if self._paused:
            return self._tasks_count - len(self._tasks) == 0
        return self._tasks_count == 0

    def wait_tasks_finish(self) -> None:
        """Block until every task is done, or, when paused, until none is running."""
        with self._cond:
            self._cond.wait_for(self._finished)

    def close(self) -> None:
        """Wait for the tasks, then stop and join the workers."""
        if self._closed:
            return
        self.wait_tasks_finish()
        with self._cond:
            self._running = False
            self._closed = True
            self._cond.notify_all()
        for thread in self._threads:
            thread.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    def _worker(self, thread_id: int) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(
                    lambda: not self._running or (not self._paused and bool(self._tasks))
                )
                if not self._running:
                    return
                task, args = self._tasks.popleft()
            try:
                task(thread_id, *args)
            except Exception as error:  # keep the worker alive
                log(LogLevel.ERROR, "thread pool task failed: %s", error)
            finally:
                with self._cond:
                    self._tasks_count -= 1
                    self._cond.notify_all()