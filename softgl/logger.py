"""Process-wide levelled logger with an optional user sink."""

from __future__ import annotations

import enum
import sys
import threading
from typing import Callable, Optional

MAX_LOG_LENGTH = 1024


class LogLevel(enum.IntEnum):
    INFO = 0
    DEBUG = 1
    WARNING = 2
    ERROR = 3


LogFunc = Callable[[LogLevel, str], None]

_lock = threading.Lock()
_log_func: Optional[LogFunc] = None
_min_level: LogLevel = LogLevel.INFO


def set_log_func(func: Optional[LogFunc]) -> None:
    """Route messages to ``func(level, message)``; ``None`` restores console output."""
    global _log_func
    with _lock:
        _log_func = func


def set_log_level(level: LogLevel) -> None:
    """Drop messages below ``level``."""
    global _min_level
    with _lock:
        _min_level = LogLevel(level)


def log(level: LogLevel, message: str, *args: object) -> None:
    """Log a printf-style message at ``level``."""
    with _lock:
        level = LogLevel(level)
        if level < _min_level:
            return

        text = message % args if args else message
        text = text[: MAX_LOG_LENGTH - 2]

        if _log_func is not None:
            _log_func(level, text)
            return

        stream = sys.stderr if level is LogLevel.ERROR else sys.stdout
        print(f"[{level.name}] : {text}", file=stream)
        sys.stdout.flush()
        sys.stderr.flush()