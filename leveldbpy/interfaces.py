"""Abstract interfaces and option records shared across the database."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional


class Comparator(ABC):
    """Total order over keys."""

    @abstractmethod
    def compare(self, a: bytes, b: bytes) -> int:
        """Return a negative number, zero or a positive number as a <, ==, > b."""

    @abstractmethod
    def name(self) -> str:
        """Name of the comparator, stored with the database."""


class FilterPolicy(ABC):
    """Builds compact filters that answer 'may this key be present?'."""

    @abstractmethod
    def name(self) -> str:
        """Name of the policy, stored with each filter."""

    @abstractmethod
    def create_filter(self, keys: Sequence[bytes]) -> bytes:
        """Build a filter summarising the given keys."""

    @abstractmethod
    def key_may_match(self, key: bytes, filter_data: bytes) -> bool:
        """Return False only if key was certainly not among the filter's keys."""


@dataclass(frozen=True)
class Range:
    """A key range from start (inclusive) to limit (exclusive)."""

    start: bytes
    limit: bytes


class CompressionType(enum.IntEnum):
    NO_COMPRESSION = 0
    SNAPPY_COMPRESSION = 1
    ZSTD_COMPRESSION = 2


@dataclass
class Options:
    """Options that control how a database is opened and behaves."""

    create_if_missing: bool = False
    error_if_exists: bool = False
    paranoid_checks: bool = False
    env: Optional[Any] = None
    comparator: Optional[Comparator] = None
    cache: Optional[Any] = None
    filter_policy: Optional[FilterPolicy] = None
    logger: Optional[Any] = None


@dataclass
class ReadOptions:
    """Options that control a read."""

    verify_checksums: bool = False
    fill_cache: bool = True
    snapshot: Optional[Any] = None


@dataclass
class WriteOptions:
    """Options that control a write."""

    sync: bool = False