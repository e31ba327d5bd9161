"""Wall-clock timers, including a context manager that logs its duration."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from softgl.logger import LogLevel, log

Clock = Callable[[], int]


@dataclass
class Timer:
    """Measures the interval between ``start`` and ``stop`` on a nanosecond clock."""

    clock: Clock = time.monotonic_ns
    _start: int = field(default=0, init=False)
    _end: int = field(default=0, init=False)

    def start(self) -> None:
        self._start = self.clock()

    def stop(self) -> None:
        self._end = self.clock()

    def elapse_millis(self) -> int:
        """Whole milliseconds between the last start and stop, truncated."""
        diff = self._end - self._start
        return int(diff / 1_000_000)


class ScopedTimer:
    """Starts timing on creation and logs the cost at debug level on exit."""

    def __init__(self, tag: str, clock: Clock = time.monotonic_ns) -> None:
        self.tag = tag
        self.elapsed_millis: Optional[int] = None
        self._timer = Timer(clock)
        self._timer.start()

    def __enter__(self) -> "ScopedTimer":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._timer.stop()
        self.elapsed_millis = self._timer.elapse_millis()
        log(LogLevel.DEBUG, "TIMER %s: cost: %d ms", self.tag, self.elapsed_millis)
        return False