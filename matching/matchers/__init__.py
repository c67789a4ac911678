from .exact_matcher import ExactMatcher
from .simple_matcher import SimpleMatcher
from .rabin_karp_matcher import RabinKarpMatcher
from .batch_matcher import BatchMatcher

__all__ = ["ExactMatcher", "SimpleMatcher", "RabinKarpMatcher", "BatchMatcher"]
