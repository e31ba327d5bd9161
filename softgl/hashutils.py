"""Hash combining, a word-oriented MurmurHash3 variant and MD5 digests."""

from __future__ import annotations

import hashlib
import struct
from typing import Hashable, Iterable, Union

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_GOLDEN = 0x9E3779B9


def _combine(seed: int, value_hash: int) -> int:
    seed &= _MASK64
    return (seed ^ ((value_hash + _GOLDEN + (seed << 6) + (seed >> 2)) & _MASK64)) & _MASK64


def hash_combine(seed: int, value: Hashable) -> int:
    """Fold the hash of ``value`` into ``seed`` and return the new 64-bit seed."""
    return _combine(seed, hash(value) & _MASK64)


def _rotl32(x: int, r: int) -> int:
    return ((x << r) | (x >> (32 - r))) & _MASK32


def murmur3(words: Iterable[int], seed: int) -> int:
    """32-bit MurmurHash3 over 32-bit words, finalised with the word count."""
    word_list = [w & _MASK32 for w in words]
    if not word_list:
        raise ValueError("murmur3 needs at least one word")

    h = seed & _MASK32
    for k in word_list:
        k = (k * 0xCC9E2D51) & _MASK32
        k = _rotl32(k, 15)
        k = (k * 0x1B873593) & _MASK32
        h ^= k
        h = _rotl32(h, 13)
        h = (h * 5 + 0xE6546B64) & _MASK32

    h ^= len(word_list) & _MASK32
    h ^= h >> 16
    h = (h * 0x85EBCA6B) & _MASK32
    h ^= h >> 13
    h = (h * 0xC2B2AE35) & _MASK32
    h ^= h >> 16
    return h


def hash_combine_murmur(seed: int, data: bytes) -> int:
    """Fold the murmur3 hash of ``data`` (little-endian words) into ``seed``."""
    if len(data) % 4:
        raise ValueError("hashing requires a size that is a multiple of 4")
    words = struct.unpack(f"<{len(data) // 4}I", data)
    return _combine(seed, murmur3(words, 0))


def md5_hex(data: Union[bytes, str]) -> str:
    """Lower-case hexadecimal MD5 digest of ``data``; text is encoded as UTF-8."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.md5(data).hexdigest()