"""Bloom filter policy for summarising the keys stored in a table."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .hashing import hash_bytes
from .interfaces import FilterPolicy

BLOOM_HASH_SEED = 0xBC9F1D34
_MASK = 0xFFFFFFFF
_MIN_BITS = 64
_MAX_PROBES = 30


def bloom_hash(key: bytes) -> int:
    """Hash a key with the seed reserved for bloom filters."""
    return hash_bytes(key, BLOOM_HASH_SEED)


def _probe_positions(h: int, probes: int, bits: int) -> Iterator[int]:
    """Yield the bit positions probed for a key hash (double hashing)."""
    delta = ((h >> 17) | (h << 15)) & _MASK
    for _ in range(probes):
        yield h % bits
        h = (h + delta) & _MASK


class BloomFilterPolicy(FilterPolicy):
    """Filter policy backed by a bloom filter with a fixed bits-per-key budget.

    A filter is the bit array followed by one byte holding the number of
    probes used to build it.
    """

    def __init__(self, bits_per_key: int) -> None:
        if bits_per_key < 0:
            raise ValueError(f"bits_per_key must not be negative: {bits_per_key}")
        self._bits_per_key = bits_per_key
        # 0.69 is roughly ln(2), which minimises the false-positive rate.
        self._k = min(max(int(bits_per_key * 0.69), 1), _MAX_PROBES)

    @property
    def bits_per_key(self) -> int:
        return self._bits_per_key

    @property
    def k(self) -> int:
        """Number of probes per key."""
        return self._k

    def name(self) -> str:
        return "leveldb.BuiltinBloomFilter2"

    def create_filter(self, keys: Sequence[bytes]) -> bytes:
        bits = max(len(keys) * self._bits_per_key, _MIN_BITS)
        nbytes = (bits + 7) // 8
        bits = nbytes * 8
        array = bytearray(nbytes)
        for key in keys:
            for pos in _probe_positions(bloom_hash(key), self._k, bits):
                array[pos // 8] |= 1 << (pos % 8)
        array.append(self._k)
        return bytes(array)

    def key_may_match(self, key: bytes, filter_data: bytes) -> bool:
        array = bytes(filter_data)
        if len(array) < 2:
            return False
        bits = (len(array) - 1) * 8
        probes = array[-1]
        if probes > _MAX_PROBES:
            # Reserved for encodings this policy does not know; match everything.
            return True
        return all(
            array[pos // 8] & (1 << (pos % 8))
            for pos in _probe_positions(bloom_hash(key), probes, bits)
        )