"""Helpers that render numbers and raw bytes as readable text."""

from __future__ import annotations


def number_to_string(num: int) -> str:
    """Render an unsigned integer in decimal."""
    if num < 0:
        raise ValueError(f"expected an unsigned number, got {num}")
    return str(num)


def escape_string(src: bytes) -> str:
    """Keep printable ASCII bytes and write every other byte as \\xNN."""
    return "".join(
        chr(byte) if 0x20 <= byte <= 0x7E else f"\\x{byte:02x}" for byte in bytes(src)
    )