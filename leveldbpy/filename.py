"""Names of the files that make up a database directory."""

from __future__ import annotations

import enum
import re
from typing import Optional

_U64_MAX = 0xFFFFFFFFFFFFFFFF
_NUMBER = re.compile(r"\+?[0-9]+")
_MANIFEST_PREFIX = "MANIFEST-"


class FileType(enum.Enum):
    LOG_FILE = enum.auto()
    DB_LOCK_FILE = enum.auto()
    TABLE_FILE = enum.auto()
    DESCRIPTOR_FILE = enum.auto()
    CURRENT_FILE = enum.auto()
    TEMP_FILE = enum.auto()
    INFO_LOG_FILE = enum.auto()


_SUFFIX_TYPES = {
    "log": FileType.LOG_FILE,
    "sst": FileType.TABLE_FILE,
    "ldb": FileType.TABLE_FILE,
    "dbtmp": FileType.TEMP_FILE,
}

_FIXED_NAMES = {
    "CURRENT": FileType.CURRENT_FILE,
    "LOCK": FileType.DB_LOCK_FILE,
    "LOG": FileType.INFO_LOG_FILE,
    "LOG.old": FileType.INFO_LOG_FILE,
}


def _parse_u64(text: str) -> Optional[int]:
    if not _NUMBER.fullmatch(text):
        return None
    value = int(text)
    return value if value <= _U64_MAX else None


def parse_filename(filename: str) -> Optional[tuple[int, FileType]]:
    """Return (number, type) for a database file's base name, or None."""
    if filename in _FIXED_NAMES:
        return 0, _FIXED_NAMES[filename]
    if filename.startswith(_MANIFEST_PREFIX):
        rest = filename
        while rest.startswith(_MANIFEST_PREFIX):
            rest = rest[len(_MANIFEST_PREFIX):]
        number = _parse_u64(rest)
        return None if number is None else (number, FileType.DESCRIPTOR_FILE)
    number_text, dot, suffix = filename.partition(".")
    if not dot:
        return None
    file_type = _SUFFIX_TYPES.get(suffix)
    if file_type is None:
        return None
    number = _parse_u64(number_text)
    return (0 if number is None else number), file_type


def make_file_name(dbname: str, number: int, suffix: str) -> str:
    return f"{dbname}/{number}.{suffix}"


def log_file_name(dbname: str, number: int) -> str:
    return make_file_name(dbname, number, "log")


def _require_positive(number: int) -> None:
    if number <= 0:
        raise ValueError(f"table file number must be positive: {number}")


def table_file_name(dbname: str, number: int) -> str:
    _require_positive(number)
    return make_file_name(dbname, number, "ldb")


def sst_table_file_name(dbname: str, number: int) -> str:
    _require_positive(number)
    return make_file_name(dbname, number, "sst")


def descriptor_file_name(dbname: str, number: int) -> str:
    return make_file_name(dbname, number, "MANIFEST")


def current_file_name(dbname: str) -> str:
    return f"{dbname}/CURRENT"


def lock_file_name(dbname: str) -> str:
    return f"{dbname}/LOCK"


def info_log_file_name(dbname: str) -> str:
    return f"{dbname}/LOG"


def temp_file_name(dbname: str, number: int) -> str:
    return f"{dbname}/LOG.{number}"


def numbered_info_log_file_name(dbname: str, number: int) -> str:
    return make_file_name(dbname, number, "LOG")


def old_info_log_file_name(dbname: str) -> str:
    return f"{dbname}/LOG.old"