from typing import List


def chunk_count(length: int, k: int) -> int:
    return length // k if k > 0 else 0


def split_chunks(data: bytes, k: int) -> List[memoryview]:
    """
    Split data into non-overlapping chunks of length k.
    The trailing remainder shorter than k is dropped. Chunks are views, not copies.
    """
    view = memoryview(data)
    return [view[i:i + k] for i in range(0, chunk_count(len(data), k) * k, k)]


def batch_capacity(query_length: int, k: int, bits_per_chunk: int) -> int:
    """Bloom bitmap size for a query: about bits_per_chunk bits per chunk, rounded down to whole bytes."""
    if k <= 0:
        return 0
    return ((query_length * bits_per_chunk // k) >> 3) << 3
