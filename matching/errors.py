class MatchingError(ValueError):
    """Base class for every error raised by the matching package."""


class InvalidLength(MatchingError):
    """A pattern or chunk is longer than the document it is matched against."""


class InvalidCapacity(MatchingError):
    """A Bloom filter bit count that is not a positive multiple of 8."""


class InvalidModulus(MatchingError):
    """A hash modulus too small for the byte alphabet."""


class DocumentError(MatchingError):
    """A document could not be read from disk."""
