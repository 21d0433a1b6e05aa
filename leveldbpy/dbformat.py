"""Internal key format: a user key followed by a packed sequence and type."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .codec import decode_fixed64, encode_fixed64
from .escaping import escape_string
from .interfaces import Comparator

NUM_LEVELS = 7
L0_COMPACTION_TRIGGER = 4
L0_SLOWDOWN_WRITES_TRIGGER = 8
L0_STOP_WRITES_TRIGGER = 12
MAX_MEM_COMPACT_LEVEL = 2
READ_BYTES_PERIOD = 1048576

MAX_SEQUENCE_NUMBER = (1 << 56) - 1
_TRAILER_SIZE = 8


class ValueType(enum.IntEnum):
    DELETION = 0x0
    VALUE = 0x1


VALUE_TYPE_FOR_SEEK = ValueType.VALUE


def pack_sequence_and_type(seq: int, value_type: ValueType) -> int:
    """Combine a sequence number and a value type into one 64-bit tag."""
    if not 0 <= seq <= MAX_SEQUENCE_NUMBER:
        raise ValueError(f"sequence number out of range: {seq}")
    return (seq << 8) | int(value_type)


@dataclass
class ParsedInternalKey:
    """An internal key split into its parts."""

    user_key: bytes = b""
    sequence: int = 0
    value_type: ValueType = ValueType.VALUE

    def debug_string(self) -> str:
        return f"'{escape_string(self.user_key)}' @ {self.sequence} : {int(self.value_type)}"

    def __len__(self) -> int:
        return len(self.user_key) + _TRAILER_SIZE


def append_internal_key(result: bytes, key: ParsedInternalKey) -> bytes:
    """Return result followed by the encoded internal key."""
    tag = pack_sequence_and_type(key.sequence, key.value_type)
    return bytes(result) + bytes(key.user_key) + encode_fixed64(tag)


def extract_user_key(internal_key: bytes) -> bytes:
    """Strip the 8-byte trailer from an internal key."""
    if len(internal_key) < _TRAILER_SIZE:
        raise ValueError("internal key is shorter than its trailer")
    return bytes(internal_key[: len(internal_key) - _TRAILER_SIZE])


class InternalKeyComparator(Comparator):
    """Orders internal keys by increasing user key, then decreasing tag."""

    def __init__(self, user_comparator: Comparator) -> None:
        self.user_comparator = user_comparator

    def compare(self, a: bytes, b: bytes) -> int:
        r = self.user_comparator.compare(extract_user_key(a), extract_user_key(b))
        if r == 0:
            anum = decode_fixed64(a[-_TRAILER_SIZE:])
            bnum = decode_fixed64(b[-_TRAILER_SIZE:])
            r = (anum < bnum) - (anum > bnum)
        return r

    def name(self) -> str:
        return "leveldb.InternalKeyComparator"


class InternalKey:
    """An encoded internal key kept apart from plain byte strings."""

    def __init__(self, rep: bytes = b"") -> None:
        self._rep = bytes(rep)

    def debug_string(self) -> str:
        return f"'{escape_string(self._rep)}'"

    def decode_from(self, data: bytes) -> None:
        self._rep = bytes(data)

    def encode(self) -> bytes:
        return self._rep

    def user_key(self) -> bytes:
        return self._rep

    def clear(self) -> None:
        self._rep = b""

    def __eq__(self, other: object) -> bool:
        return isinstance(other, InternalKey) and other._rep == self._rep

    def __hash__(self) -> int:
        return hash(self._rep)

    def __repr__(self) -> str:
        return f"InternalKey({self._rep!r})"


class LookupKey:
    """A key prepared for lookups at a given sequence number."""

    def __init__(self, user_key: bytes, sequence: int) -> None:
        tag = pack_sequence_and_type(sequence, VALUE_TYPE_FOR_SEEK)
        self._mem = bytes(user_key) + encode_fixed64(tag)

    def memtable_key(self) -> bytes:
        return self._mem

    def internal_key(self) -> bytes:
        return self._mem