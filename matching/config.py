from dataclasses import dataclass
from enum import Enum

# Chunk length used when none is given on the command line
DEFAULT_CHUNK_SIZE: int = 20

# Large prime for the Rabin-Karp hash (DEFAULT_MODULUS * 256 fits in 64 bits)
DEFAULT_MODULUS: int = 5003943032159437

# Rolling hash base, one digit per possible byte value
BYTE_ALPHABET: int = 256

# Bloom filter hash family
BLOOM_HASH_NUM: int = 10
H1PRIME: int = 4189793
H2PRIME: int = 3296731

# Bloom bitmap bits reserved per inserted chunk
BITS_PER_CHUNK: int = 10

# Diagnostics
PRINT_RK_HASH: int = 5
PRINT_BLOOM_BITS: int = 160


class BatchCount(Enum):
    """What the batch matcher tallies."""

    WINDOWS = "windows"  # target windows that probably match any query chunk
    CHUNKS = "chunks"    # query chunks that probably occur somewhere in the target


@dataclass(frozen=True)
class MatchConfig:
    chunk_size: int = DEFAULT_CHUNK_SIZE
    modulus: int = DEFAULT_MODULUS
    num_hashes: int = BLOOM_HASH_NUM
    bits_per_chunk: int = BITS_PER_CHUNK
    batch_count: BatchCount = BatchCount.WINDOWS
