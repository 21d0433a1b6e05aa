"""An ordered set backed by a skip list."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterator
from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K")

MAX_HEIGHT = 12
_BRANCHING = 4


def _natural_order(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class _Node(Generic[K]):
    __slots__ = ("key", "next")

    def __init__(self, key: Any, height: int) -> None:
        self.key = key
        self.next: list[Optional[_Node[K]]] = [None] * height


class SkipList(Generic[K]):
    """Sorted collection of distinct keys with logarithmic insert and lookup.

    ``compare`` returns a negative number, zero or a positive number as its
    first argument sorts before, equal to or after the second.
    """

    MAX_HEIGHT = MAX_HEIGHT

    def __init__(
        self,
        compare: Optional[Callable[[K, K], int]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._compare = compare or _natural_order
        self._rng = rng if rng is not None else random.Random()
        self._head: _Node[K] = _Node(None, MAX_HEIGHT)
        self._max_height = 1
        self._len = 0

    def random_height(self) -> int:
        """Pick a node height; each extra level has probability 1/4."""
        height = 1
        while height < MAX_HEIGHT and self._rng.randrange(_BRANCHING) == 0:
            height += 1
        return height

    def _find_greater_or_equal(self, key: K) -> tuple[Optional[_Node[K]], list[_Node[K]]]:
        prev = [self._head] * MAX_HEIGHT
        node = self._head
        level = self._max_height - 1
        while True:
            nxt = node.next[level]
            if nxt is not None and self._compare(nxt.key, key) < 0:
                node = nxt
                continue
            prev[level] = node
            if level == 0:
                return nxt, prev
            level -= 1

    def insert(self, key: K) -> bool:
        """Add key; return False if an equal key was already present."""
        found, prev = self._find_greater_or_equal(key)
        if found is not None and self._compare(found.key, key) == 0:
            return False
        height = self.random_height()
        self._max_height = max(self._max_height, height)
        node: _Node[K] = _Node(key, height)
        for level, before in enumerate(prev[:height]):
            node.next[level] = before.next[level]
            before.next[level] = node
        self._len += 1
        return True

    def contains(self, key: K) -> bool:
        found, _ = self._find_greater_or_equal(key)
        return found is not None and self._compare(found.key, key) == 0

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        node = self._head.next[0]
        while node is not None:
            yield node.key
            node = node.next[0]

    def __len__(self) -> int:
        return self._len