"""Whole-file reading and writing helpers."""

from __future__ import annotations

import os
from typing import Union

from softgl.logger import LogLevel, log

PathLike = Union[str, "os.PathLike[str]"]

_ENCODING = "utf-8"


def exists(path: PathLike) -> bool:
    """True when ``path`` can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def read_bytes(path: PathLike) -> bytes:
    """Read the whole file; an empty file is logged and yields ``b""``."""
    with open(path, "rb") as file:
        data = file.read()
    if not data:
        log(LogLevel.ERROR, "failed to read file, invalid size: %d", 0)
    return data


def read_text(path: PathLike) -> str:
    """Read the whole file as UTF-8 text."""
    data = read_bytes(path)
    if not data:
        return ""
    return data.decode(_ENCODING)


def write_bytes(path: PathLike, data: bytes) -> None:
    """Write ``data`` to ``path``, replacing any existing content."""
    with open(path, "wb") as file:
        file.write(data)


def write_text(path: PathLike, text: str) -> None:
    """Write ``text`` to ``path`` as UTF-8, replacing any existing content."""
    with open(path, "w", encoding=_ENCODING) as file:
        file.write(text)