"""Fixed-width little-endian integer encoding."""

from __future__ import annotations

import struct

_U32_MAX = 0xFFFFFFFF
_U64_MAX = 0xFFFFFFFFFFFFFFFF


def encode_fixed32(value: int) -> bytes:
    """Encode an unsigned 32-bit integer as 4 little-endian bytes."""
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"value out of range for fixed32: {value}")
    return struct.pack("<I", value)


def encode_fixed64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer as 8 little-endian bytes."""
    if not 0 <= value <= _U64_MAX:
        raise ValueError(f"value out of range for fixed64: {value}")
    return struct.pack("<Q", value)


def decode_fixed32(src: bytes) -> int:
    """Decode the first 4 bytes of src as a little-endian unsigned integer."""
    if len(src) < 4:
        raise ValueError("fixed32 needs at least 4 bytes")
    return struct.unpack_from("<I", src)[0]


def decode_fixed64(src: bytes) -> int:
    """Decode the first 8 bytes of src as a little-endian unsigned integer."""
    if len(src) < 8:
        raise ValueError("fixed64 needs at least 8 bytes")
    return struct.unpack_from("<Q", src)[0]