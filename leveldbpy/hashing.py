"""The 32-bit hash used for bloom filters and cache sharding."""

from __future__ import annotations

import struct

_M = 0xC6A4A793
_R = 24
_MASK = 0xFFFFFFFF


def hash_bytes(data: bytes, seed: int) -> int:
    """Hash data with the given 32-bit seed, returning an unsigned 32-bit value."""
    if not 0 <= seed <= _MASK:
        raise ValueError(f"seed out of range: {seed}")
    data = bytes(data)
    h = (seed ^ (len(data) * _M)) & _MASK

    body_len = len(data) - len(data) % 4
    for (word,) in struct.iter_unpack("<I", data[:body_len]):
        h = ((h + word) * _M) & _MASK
        h ^= h >> 16

    tail = data[body_len:]
    if tail:
        h = (h + int.from_bytes(tail, "little")) & _MASK
        h = (h * _M) & _MASK
        h ^= h >> _R
    return h