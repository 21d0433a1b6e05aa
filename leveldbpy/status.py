"""Error types raised by database operations."""

from __future__ import annotations


def slice_to_string(data: bytes | bytearray | memoryview) -> str:
    """Decode raw bytes as UTF-8, replacing invalid sequences with U+FFFD."""
    return bytes(data).decode("utf-8", errors="replace")


def _as_text(message: str | bytes | bytearray | memoryview) -> str:
    if isinstance(message, str):
        return message
    return slice_to_string(message)


class LevelDBError(Exception):
    """Base class for every failure the database reports."""

    kind = "Error"

    def __init__(self, message: str | bytes = "") -> None:
        self.message = _as_text(message)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.kind}({self.message})"


class NotFoundError(LevelDBError):
    """The requested key or file does not exist."""

    kind = "NotFound"


class CorruptionError(LevelDBError):
    """Stored data failed a consistency check."""

    kind = "Corruption"


class NotSupportedError(LevelDBError):
    """The requested operation is not supported."""

    kind = "NotSupported"


class InvalidArgumentError(LevelDBError):
    """An argument was not acceptable."""

    kind = "InvalidArgument"


class IOStatusError(LevelDBError):
    """An I/O operation failed; carries no message."""

    kind = "IOError"

    def __init__(self) -> None:
        super().__init__("")

    def __str__(self) -> str:
        return self.kind