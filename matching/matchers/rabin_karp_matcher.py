from dataclasses import dataclass, field as dc_field
from typing import List, Optional

from matching.algorithms.finite_field import FiniteField
from matching.algorithms.rolling_hash import RollingHash, window_hash
from matching.config import PRINT_RK_HASH
from matching.errors import InvalidLength


@dataclass
class RabinKarpTrace:
    """Pattern hash and the first few target window hashes of one scan."""

    limit: int = PRINT_RK_HASH
    pattern_hash: Optional[int] = None
    window_hashes: List[int] = dc_field(default_factory=list)

    @property
    def full(self) -> bool:
        return len(self.window_hashes) >= self.limit

    def record_window(self, h: int) -> None:
        if not self.full:
            self.window_hashes.append(h)

    def as_dict(self) -> dict:
        return {"pattern_hash": self.pattern_hash, "window_hashes": list(self.window_hashes)}


def rabin_karp_match(
    pattern: bytes,
    target: bytes,
    field: Optional[FiniteField] = None,
    trace: Optional[RabinKarpTrace] = None,
) -> bool:
    """
    Check if pattern appears in target as a substring using Rabin-Karp.

    Equal hashes are confirmed byte by byte before a match is reported.
    With a trace, the scan keeps rolling past a match until the trace holds
    its full prefix of window hashes (or the target runs out).
    """
    field = field or FiniteField()
    k = len(pattern)
    n = len(target)
    if k == 0:
        raise InvalidLength("pattern must not be empty")

    ps_hash = window_hash(pattern, k, field)
    if trace is not None:
        trace.pattern_hash = ps_hash
    if n < k:
        return False

    found = False
    rh = RollingHash(target, k, field)
    for i in range(n - k + 1):
        if i > 0:
            rh.advance(target[i - 1], target[i + k - 1])
        if trace is not None:
            trace.record_window(rh.value)
        if not found and rh.value == ps_hash and target[i:i + k] == pattern:
            found = True
        if found and (trace is None or trace.full):
            break
    return found


class RabinKarpMatcher:
    """
    Matches each chunk on its own with a Rabin-Karp scan of the target.
    One trace per chunk is kept for diagnostics, in chunk order.
    """

    def __init__(self, field: Optional[FiniteField] = None) -> None:
        self.field = field or FiniteField()
        self.traces: List[RabinKarpTrace] = []

    def match(self, chunk: bytes, target: bytes) -> bool:
        trace = RabinKarpTrace()
        self.traces.append(trace)
        return rabin_karp_match(chunk, target, self.field, trace)

    def diagnostics(self) -> dict:
        if not self.traces:
            return {}
        return {"chunks": [t.as_dict() for t in self.traces]}

    def __repr__(self) -> str:
        return f"RabinKarpMatcher(field={self.field})"
