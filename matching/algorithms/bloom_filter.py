import math
from typing import Iterable, Iterator

from matching.config import BITS_PER_CHUNK, BLOOM_HASH_NUM, H1PRIME, H2PRIME, PRINT_BLOOM_BITS
from matching.errors import InvalidCapacity


def derived_hash(i: int, value: int) -> int:
    """
    The i-th hash of a Rabin-Karp value. Not reduced into the bitmap range;
    callers take it modulo the bit capacity.
    """
    return (value % H1PRIME) + i * (value % H2PRIME) + 1 + i * i


class BloomFilter:
    """
    Bloom Filter over Rabin-Karp hash values.

    Parameters:
      bit_capacity: number of bits in the bitmap, a positive multiple of 8
      num_hashes: number of derived hash functions per value

    Bits are packed big-endian: bit b lives in byte b // 8 and bit 0 of a
    byte is its most significant bit.

    Methods:
      add(value), __contains__(value), add_many(values), debug_dump(count), fill_ratio
    """

    def __init__(self, bit_capacity: int, num_hashes: int = BLOOM_HASH_NUM) -> None:
        if bit_capacity <= 0 or bit_capacity % 8 != 0:
            raise InvalidCapacity(f"bit capacity must be a positive multiple of 8, got {bit_capacity}")
        if num_hashes <= 0:
            raise ValueError("num_hashes must be positive")
        self.m = int(bit_capacity)
        self.k = int(num_hashes)
        self._bits = bytearray(self.m // 8)

    @staticmethod
    def capacity_for(item_count: int, bits_per_item: int = BITS_PER_CHUNK) -> int:
        """Bitmap size for item_count values, rounded down to whole bytes."""
        return ((item_count * bits_per_item) >> 3) << 3

    def _hashes(self, value: int) -> Iterator[int]:
        for i in range(self.k):
            yield derived_hash(i, value) % self.m

    def _set_bit(self, idx: int) -> None:
        self._bits[idx >> 3] |= 0x80 >> (idx & 7)

    def _get_bit(self, idx: int) -> bool:
        return bool(self._bits[idx >> 3] & (0x80 >> (idx & 7)))

    def add(self, value: int) -> None:
        for idx in self._hashes(value):
            self._set_bit(idx)

    def add_many(self, values: Iterable[int]) -> None:
        for v in values:
            self.add(v)

    def __contains__(self, value: int) -> bool:
        return all(self._get_bit(idx) for idx in self._hashes(value))

    def query(self, value: int) -> bool:
        """True if value is probably in the filter, False if it is definitely not."""
        return value in self

    @property
    def bits(self) -> bytes:
        return bytes(self._bits)

    @property
    def fill_ratio(self) -> float:
        set_bits = sum(b.bit_count() for b in self._bits)
        return set_bits / self.m

    def expected_false_positive_rate(self, item_count: int) -> float:
        """Theoretical false positive rate after inserting item_count distinct values."""
        return (1.0 - math.exp(-self.k * item_count / self.m)) ** self.k

    def debug_dump(self, count: int = PRINT_BLOOM_BITS) -> str:
        """First count bits of the bitmap as space separated hex bytes."""
        if count % 8 != 0:
            raise InvalidCapacity(f"dump size must be a multiple of 8, got {count}")
        return "".join(f"{b:02x} " for b in self._bits[: count >> 3])

    def __repr__(self) -> str:
        return f"BloomFilter(m={self.m}, k={self.k}, fill_ratio={self.fill_ratio:.4f})"
