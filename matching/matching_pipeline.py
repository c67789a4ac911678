import logging
import time
from enum import Enum
from typing import Dict, Iterable, List, Optional, Union

from matching.algorithms.bloom_filter import BloomFilter
from matching.algorithms.finite_field import FiniteField
from matching.config import BatchCount, MatchConfig
from matching.errors import InvalidLength
from matching.matchers.batch_matcher import BatchMatcher
from matching.matchers.exact_matcher import ExactMatcher
from matching.matchers.rabin_karp_matcher import RabinKarpMatcher
from matching.matchers.simple_matcher import SimpleMatcher
from matching.utils.chunking import batch_capacity, chunk_count, split_chunks

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    EXACT = 0
    SIMPLE = 1
    RK = 2
    RKBATCH = 3

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: Union[int, str, "Algorithm"]) -> "Algorithm":
        """Accept an Algorithm, its numeric id ("2") or its name ("rk")."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        if text.isdigit():
            return cls(int(text))
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"unknown algorithm {value!r}, choose from 0 1 2 3") from None


class MatchingPipeline:
    """
    Runs one matching algorithm over a (query, target) pair:
      - EXACT   (whole-document equality)
      - SIMPLE  (brute-force substring scan per chunk)
      - RK      (Rabin-Karp scan per chunk)
      - RKBATCH (Bloom filter over all chunks, one scan of the target)

    Use run to get a JSON-serializable summary of the outcome.
    """

    def __init__(self, config: Optional[MatchConfig] = None) -> None:
        self.config = config or MatchConfig()
        if self.config.chunk_size <= 0:
            raise InvalidLength(f"chunk size must be positive, got {self.config.chunk_size}")
        self.field = FiniteField(self.config.modulus)

    def _make_matcher(self, algorithm: Algorithm):
        if algorithm is Algorithm.EXACT:
            return ExactMatcher()
        if algorithm is Algorithm.SIMPLE:
            return SimpleMatcher()
        if algorithm is Algorithm.RK:
            return RabinKarpMatcher(self.field)
        return BatchMatcher(self.field, count=self.config.batch_count, num_hashes=self.config.num_hashes)

    def bloom_capacity(self, query: bytes, target: bytes) -> int:
        k = self.config.chunk_size
        if self.config.batch_count is BatchCount.WINDOWS:
            return batch_capacity(len(query), k, self.config.bits_per_chunk)
        return BloomFilter.capacity_for(max(0, len(target) - k + 1), self.config.bits_per_chunk)

    def run(self, algorithm: Union[int, str, Algorithm], query: bytes, target: bytes) -> Dict:
        """
        Match query against target and return a dict with the tally, the
        percentage of matched chunks, the elapsed time and diagnostics.
        """
        algorithm = Algorithm.parse(algorithm)
        matcher = self._make_matcher(algorithm)
        k = self.config.chunk_size
        started = time.perf_counter_ns()

        if algorithm is Algorithm.EXACT:
            is_exact = matcher.match(query, target)
            return {
                "algorithm": algorithm.label,
                "exact": is_exact,
                "elapsed_us": (time.perf_counter_ns() - started) // 1000,
                "diagnostics": {},
            }

        chunks = chunk_count(len(query), k)
        if chunks and len(target) < k:
            raise InvalidLength(f"chunk length {k} exceeds target length {len(target)}")

        if algorithm is Algorithm.RKBATCH:
            capacity = self.bloom_capacity(query, target)
            matched = matcher.match_all(capacity, k, query, target)
        else:
            matched = sum(1 for chunk in split_chunks(query, k) if matcher.match(chunk, target))

        elapsed_us = (time.perf_counter_ns() - started) // 1000
        summary = {
            "algorithm": algorithm.label,
            "chunk_size": k,
            "matched": matched,
            "chunks": chunks,
            "percentage": (matched / chunks) if chunks else 0.0,
            "elapsed_us": elapsed_us,
            "diagnostics": matcher.diagnostics(),
        }
        if algorithm is Algorithm.RKBATCH:
            summary["batch_count"] = self.config.batch_count.value
        logger.info(
            "%s: %d chunks matched (out of %d) in %d us", algorithm.label, matched, chunks, elapsed_us
        )
        return summary

    def compare(
        self,
        query: bytes,
        target: bytes,
        algorithms: Iterable[Algorithm] = (Algorithm.SIMPLE, Algorithm.RK, Algorithm.RKBATCH),
    ) -> List[Dict]:
        return [self.run(a, query, target) for a in algorithms]

    def __repr__(self) -> str:
        return f"MatchingPipeline(config={self.config}, field={self.field})"
