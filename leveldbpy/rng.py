"""A small deterministic pseudo-random number generator."""

from __future__ import annotations

_U16_MAX = 0xFFFF
_U32_MAX = 0xFFFFFFFF


class Random:
    """Deterministic generator seeded with a 31-bit value."""

    def __init__(self, seed: int) -> None:
        seed &= 0x7FFFFFFF
        self._seed = 1 if seed in (0, _U32_MAX) else seed

    def next(self) -> int:
        """Advance the generator and return the new state."""
        product = (self._seed * _U16_MAX) & _U32_MAX
        state = ((product >> 31) + product) & _U32_MAX
        self._seed = state % _U32_MAX
        return self._seed

    def uniform(self, n: int) -> int:
        """Return a value in [0, n)."""
        if n <= 0:
            raise ValueError("n must be positive")
        return self.next() % n

    def one_in(self, n: int) -> bool:
        """Return True roughly once in every n calls."""
        if n <= 0:
            raise ValueError("n must be positive")
        return self.next() % n == 0

    def skew(self) -> int:
        """Return a value built from the product of two draws, below 2**16."""
        r = self.next()
        r = (r * self.next()) & _U32_MAX
        return r >> 16