from .finite_field import FiniteField
from .rolling_hash import RollingHash, iter_window_hashes, window_hash
from .bloom_filter import BloomFilter, derived_hash

__all__ = ["FiniteField", "RollingHash", "iter_window_hashes", "window_hash", "BloomFilter", "derived_hash"]
