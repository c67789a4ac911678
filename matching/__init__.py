"""
Chunk matching between a query document and a target document.

This package provides:
- algorithms: finite field arithmetic, Rabin-Karp rolling hash, Bloom Filter
- matchers: exact, brute-force, Rabin-Karp and Bloom-filter batch matching
- matching_pipeline: selects one matcher and tallies matched chunks
"""

from .matching_pipeline import Algorithm, MatchingPipeline

__all__ = ["Algorithm", "MatchingPipeline"]
