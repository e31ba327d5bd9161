"""Two-dimensional element buffers with linear, tiled and Morton-order storage."""

from __future__ import annotations

import enum
from typing import ClassVar, Generic, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class BufferLayout(enum.Enum):
    """How the two-dimensional coordinates are laid out in flat storage."""

    LINEAR = 0
    TILED = 1
    MORTON = 2


class Buffer(Generic[T]):
    """A width x height grid of elements stored row by row.

    Elements should be immutable values (numbers, tuples): fresh storage and
    :meth:`clear` fill every slot with the same ``default`` object.
    """

    layout: ClassVar[BufferLayout] = BufferLayout.LINEAR

    def __init__(self, default: T = 0) -> None:  # type: ignore[assignment]
        self.default = default
        self.width = 0
        self.height = 0
        self.inner_width = 0
        self.inner_height = 0
        self._data: Optional[List[T]] = None

    def _init_layout(self) -> None:
        self.inner_width = self.width
        self.inner_height = self.height

    def convert_index(self, x: int, y: int) -> int:
        """Flat storage index of the element at ``(x, y)``."""
        return x + y * self.inner_width

    def create(self, width: int, height: int, data: Optional[Sequence[T]] = None) -> None:
        """Allocate storage for a ``width`` x ``height`` grid.

        Non-positive sizes and a size equal to the current one leave the buffer
        untouched. ``data``, when given, must hold exactly one element per slot
        of the internal storage.
        """
        if width <= 0 or height <= 0:
            return
        if self.width == width and self.height == height:
            return
        self.width = width
        self.height = height
        self._init_layout()

        size = self.inner_width * self.inner_height
        if data is not None:
            values = list(data)
            if len(values) != size:
                raise ValueError(f"expected {size} elements, got {len(values)}")
            self._data = values
        else:
            self._data = [self.default] * size

    def destroy(self) -> None:
        """Release storage and reset all dimensions to zero."""
        self.width = 0
        self.height = 0
        self.inner_width = 0
        self.inner_height = 0
        self._data = None

    @property
    def raw_data(self) -> Optional[List[T]]:
        """The internal flat storage, or ``None`` when empty."""
        return self._data

    @property
    def raw_data_size(self) -> int:
        return len(self._data) if self._data is not None else 0

    @property
    def empty(self) -> bool:
        return self._data is None

    def _in_range(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> Optional[T]:
        """Element at ``(x, y)``, or ``None`` when out of range or empty."""
        if self._data is None or not self._in_range(x, y):
            return None
        return self._data[self.convert_index(x, y)]

    def set(self, x: int, y: int, value: T) -> None:
        """Store ``value`` at ``(x, y)``; out-of-range writes are ignored."""
        if self._data is None or not self._in_range(x, y):
            return
        self._data[self.convert_index(x, y)] = value

    def copy_raw_data(self, flip_y: bool = False) -> List[T]:
        """A copy of the internal storage, optionally with storage rows reversed."""
        if self._data is None:
            return []
        if not flip_y:
            return list(self._data)
        w = self.inner_width
        rows = [self._data[row * w:(row + 1) * w] for row in range(self.inner_height)]
        return [value for row in reversed(rows) for value in row]

    def clear(self) -> None:
        """Reset every slot to the default value."""
        self.set_all(self.default)

    def set_all(self, value: T) -> None:
        """Set every slot to ``value``."""
        if self._data is not None:
            self._data[:] = [value] * len(self._data)


class _TileBuffer(Buffer[T]):
    tile_bits: ClassVar[int] = 0

    def __init__(self, default: T = 0) -> None:  # type: ignore[assignment]
        super().__init__(default)
        self.tile_width = 0
        self.tile_height = 0

    @classmethod
    def tile_size(cls) -> int:
        return 1 << cls.tile_bits

    def _init_layout(self) -> None:
        size = self.tile_size()
        self.tile_width = (self.width + size - 1) // size
        self.tile_height = (self.height + size - 1) // size
        self.inner_width = self.tile_width * size
        self.inner_height = self.tile_height * size

    def destroy(self) -> None:
        super().destroy()
        self.tile_width = 0
        self.tile_height = 0

    def _tile_base(self, x: int, y: int) -> int:
        bits = self.tile_bits
        tile_x = x >> bits
        tile_y = y >> bits
        return (tile_y * self.tile_width + tile_x) << bits << bits


class TiledBuffer(_TileBuffer[T]):
    """Storage grouped in 4x4 tiles, each tile stored row by row."""

    layout: ClassVar[BufferLayout] = BufferLayout.TILED
    tile_bits: ClassVar[int] = 2

    def convert_index(self, x: int, y: int) -> int:
        bits = self.tile_bits
        mask = self.tile_size() - 1
        return self._tile_base(x, y) + ((y & mask) << bits) + (x & mask)


class MortonBuffer(_TileBuffer[T]):
    """Storage grouped in 32x32 tiles, each tile in Morton (Z-curve) order."""

    layout: ClassVar[BufferLayout] = BufferLayout.MORTON
    tile_bits: ClassVar[int] = 5

    def convert_index(self, x: int, y: int) -> int:
        mask = self.tile_size() - 1
        return self._tile_base(x, y) + encode16_morton2(x & mask, y & mask)


def encode16_morton2(x: int, y: int) -> int:
    """Interleave the bits of two 8-bit values into a 16-bit Morton code (x in even bits)."""
    res = (x & 0xFF) | ((y & 0xFF) << 16)
    res = (res | (res << 4)) & 0x0F0F0F0F
    res = (res | (res << 2)) & 0x33333333
    res = (res | (res << 1)) & 0x55555555
    return (res | (res >> 15)) & 0xFFFF


_LAYOUT_CLASSES = {
    BufferLayout.LINEAR: Buffer,
    BufferLayout.TILED: TiledBuffer,
    BufferLayout.MORTON: MortonBuffer,
}


def make_layout(width: int, height: int, layout: BufferLayout) -> Buffer:
    """Create a buffer of the class matching ``layout`` and allocate it."""
    buffer = _LAYOUT_CLASSES[BufferLayout(layout)]()
    buffer.create(width, height)
    return buffer