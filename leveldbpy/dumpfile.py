"""Identify database files and dispatch them to the matching dumper."""

from __future__ import annotations

from typing import Optional

from .filename import FileType, parse_filename
from .status import InvalidArgumentError, NotSupportedError

_DUMPABLE = {
    FileType.LOG_FILE: "log",
    FileType.TABLE_FILE: "table",
    FileType.DESCRIPTOR_FILE: "descriptor",
}


def guess_type(file_name: str) -> Optional[FileType]:
    """Return the file type implied by the base name of a path, or None."""
    parsed = parse_filename(file_name.rsplit("/", 1)[-1])
    return None if parsed is None else parsed[1]


def dump_file(file_name: str) -> None:
    """Check that a file can be dumped and dump it.

    Raises InvalidArgumentError for unknown or non-dumpable files and
    NotSupportedError for dumpable kinds that have no reader available.
    """
    file_type = guess_type(file_name)
    if file_type is None:
        raise InvalidArgumentError(f"{file_name}: Unknown file type")
    kind = _DUMPABLE.get(file_type)
    if kind is None:
        raise InvalidArgumentError(f"{file_name}: not a dump-able file")
    raise NotSupportedError(f"{file_name}: no reader for {kind} files")