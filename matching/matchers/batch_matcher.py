import logging
from dataclasses import dataclass
from typing import Optional

from matching.algorithms.bloom_filter import BloomFilter
from matching.algorithms.finite_field import FiniteField
from matching.algorithms.rolling_hash import iter_window_hashes, window_hash
from matching.config import BLOOM_HASH_NUM, PRINT_BLOOM_BITS, BatchCount
from matching.errors import InvalidLength
from matching.utils.chunking import split_chunks

logger = logging.getLogger(__name__)


@dataclass
class BatchTrace:
    """Bloom bitmap prefix captured right after the insertion phase."""

    dump_bits: int = PRINT_BLOOM_BITS
    bloom_bits: Optional[str] = None
    fill_ratio: Optional[float] = None

    def as_dict(self) -> dict:
        return {"bloom_bits": self.bloom_bits, "fill_ratio": self.fill_ratio}


def batch_match(
    bit_capacity: int,
    k: int,
    query: bytes,
    target: bytes,
    field: Optional[FiniteField] = None,
    count: BatchCount = BatchCount.WINDOWS,
    num_hashes: int = BLOOM_HASH_NUM,
    trace: Optional[BatchTrace] = None,
) -> int:
    """
    Match all k-length chunks of query against target in one pass.

    WINDOWS: the chunk hashes go into the filter and every target window that
    probably matches one of them counts once.
    CHUNKS: the target window hashes go into the filter and every query chunk
    that probably occurs in the target counts once.

    No byte-level verification is done, so Bloom false positives and hash
    collisions can inflate the tally.
    """
    if k <= 0:
        raise InvalidLength(f"chunk length must be positive, got {k}")
    field = field or FiniteField()
    chunks = split_chunks(query, k)
    if not chunks or len(target) < k:
        return 0

    bloom = BloomFilter(bit_capacity, num_hashes=num_hashes)
    if count is BatchCount.WINDOWS:
        bloom.add_many(window_hash(c, k, field) for c in chunks)
        probes = iter_window_hashes(target, k, field)
    else:
        bloom.add_many(iter_window_hashes(target, k, field))
        probes = (window_hash(c, k, field) for c in chunks)

    if trace is not None:
        trace.bloom_bits = bloom.debug_dump(trace.dump_bits)
        trace.fill_ratio = bloom.fill_ratio
    logger.debug("Bloom filter populated: %r", bloom)

    return sum(1 for h in probes if h in bloom)


class BatchMatcher:
    """
    Batch Rabin-Karp matching backed by a Bloom filter.
    Time: O(n + m) for a target of length n and a query of length m.
    """

    def __init__(
        self,
        field: Optional[FiniteField] = None,
        count: BatchCount = BatchCount.WINDOWS,
        num_hashes: int = BLOOM_HASH_NUM,
    ) -> None:
        self.field = field or FiniteField()
        self.count = count
        self.num_hashes = num_hashes
        self.trace: Optional[BatchTrace] = None

    def match_all(self, bit_capacity: int, k: int, query: bytes, target: bytes) -> int:
        self.trace = BatchTrace()
        return batch_match(
            bit_capacity, k, query, target,
            field=self.field, count=self.count, num_hashes=self.num_hashes, trace=self.trace,
        )

    def diagnostics(self) -> dict:
        return self.trace.as_dict() if self.trace else {}

    def __repr__(self) -> str:
        return f"BatchMatcher(field={self.field}, count={self.count.value}, num_hashes={self.num_hashes})"
