from typing import Iterator, Optional

from matching.algorithms.finite_field import FiniteField
from matching.config import BYTE_ALPHABET
from matching.errors import InvalidLength


def window_hash(data: bytes, k: int, field: FiniteField, start: int = 0) -> int:
    """Hash of data[start:start + k] computed from scratch in O(k)."""
    if k <= 0:
        raise InvalidLength(f"window length must be positive, got {k}")
    if start < 0 or start + k > len(data):
        raise InvalidLength(
            f"window [{start}, {start + k}) does not fit in a sequence of length {len(data)}"
        )
    h = 0
    for byte in data[start:start + k]:
        h = field.add(field.mul(BYTE_ALPHABET, h), byte)
    return h


class RollingHash:
    """
    Polynomial hash of a sliding window of length k:

        H(w) = sum(w[i] * 256 ** (k - 1 - i)) mod P

    Moving the window one position to the right costs O(1).
    """

    def __init__(self, data: bytes, k: int, field: Optional[FiniteField] = None) -> None:
        self.field = field or FiniteField()
        if k <= 0:
            raise InvalidLength(f"window length must be positive, got {k}")
        if len(data) < k:
            raise InvalidLength(f"sequence of length {len(data)} is shorter than window {k}")
        self.k = k
        self.base_exp = self.field.pow(BYTE_ALPHABET, k - 1)
        self.value = window_hash(data, k, self.field)

    @staticmethod
    def roll(field: FiniteField, old_hash: int, outgoing: int, incoming: int, base_exp: int) -> int:
        # sub() must bring the value back into [0, P) before it feeds the multiply
        stripped = field.sub(old_hash, field.mul(outgoing, base_exp))
        return field.add(field.mul(stripped, BYTE_ALPHABET), incoming)

    def advance(self, outgoing: int, incoming: int) -> int:
        self.value = self.roll(self.field, self.value, outgoing, incoming, self.base_exp)
        return self.value

    def __repr__(self) -> str:
        return f"RollingHash(k={self.k}, value={self.value}, base_exp={self.base_exp})"


def iter_window_hashes(data: bytes, k: int, field: Optional[FiniteField] = None) -> Iterator[int]:
    """
    Yield the hash of every k-length window of data, left to right.

    Produces len(data) - k + 1 values; nothing when data is shorter than k.
    """
    if len(data) < k:
        return
    rh = RollingHash(data, k, field)
    yield rh.value
    for i in range(len(data) - k):
        yield rh.advance(data[i], data[i + k])
