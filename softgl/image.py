"""Reading and writing images as RGBA pixel buffers."""

from __future__ import annotations

import os
from typing import List, Sequence, Tuple, Union

import numpy as np
from PIL import Image, ImageOps

from softgl.buffer import Buffer
from softgl.logger import LogLevel, log

RGBA = Tuple[int, int, int, int]
PathLike = Union[str, "os.PathLike[str]"]

_FLT_MAX = float(np.finfo(np.float32).max)
_FLT_MIN = float(np.finfo(np.float32).tiny)

_MODES = {1: "L", 2: "LA", 3: "RGB", 4: "RGBA"}


def read_image_rgba(path: PathLike) -> Buffer | None:
    """Load an image file into a linear buffer of ``(r, g, b, a)`` tuples.

    Grey images are spread over the colour channels and images without alpha
    get an alpha of 255. Returns ``None`` when the file cannot be decoded.
    """
    try:
        with Image.open(path) as img:
            img.load()
            rgba = img.convert("RGBA")
    except (OSError, ValueError):
        log(LogLevel.DEBUG, "read_image_rgba failed, path: %s", os.fspath(path))
        return None

    width, height = rgba.size
    raw = rgba.tobytes()
    pixels = [tuple(raw[i:i + 4]) for i in range(0, len(raw), 4)]
    buffer: Buffer = Buffer((0, 0, 0, 0))
    buffer.create(width, height, pixels)
    return buffer


def write_image(
    path: PathLike,
    width: int,
    height: int,
    comp: int,
    data: Union[bytes, bytearray, memoryview],
    flip_y: bool = False,
) -> None:
    """Write tightly packed 8-bit pixels with ``comp`` channels (1 to 4) as a PNG file."""
    mode = _MODES.get(comp)
    if mode is None:
        raise ValueError(f"unsupported channel count: {comp}")
    raw = bytes(data)
    expected = width * height * comp
    if len(raw) != expected:
        raise ValueError(f"expected {expected} bytes, got {len(raw)}")
    img = Image.frombytes(mode, (width, height), raw)
    if flip_y:
        img = ImageOps.flip(img)
    img.save(path, format="PNG")


def convert_float_image(src: Sequence[float], width: int, height: int) -> List[RGBA]:
    """Normalise a float depth image to grey RGBA pixels spanning 0..255."""
    count = width * height
    values = np.asarray(src, dtype=np.float32).reshape(-1)
    if values.size < count:
        raise ValueError(f"expected {count} values, got {values.size}")
    values = values[:count]

    depth_min = min(_FLT_MAX, float(values.min())) if count else _FLT_MAX
    depth_max = max(_FLT_MIN, float(values.max())) if count else _FLT_MIN
    span = depth_max - depth_min

    result: List[RGBA] = []
    for depth in values:
        if span == 0:
            level = 0
        else:
            level = int(((float(depth) - depth_min) / span) * 255.0)
        grey = max(0, min(255, level))
        result.append((grey, grey, grey, 255))
    return result