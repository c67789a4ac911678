from matching.errors import InvalidLength


def simple_substr_match(pattern: bytes, target: bytes) -> bool:
    """Brute-force check that pattern appears somewhere in target."""
    k = len(pattern)
    if k == 0:
        raise InvalidLength("pattern must not be empty")
    for i in range(len(target) - k + 1):
        if target[i:i + k] == pattern:
            return True
    return False


class SimpleMatcher:
    """Baseline: slide over every target position and compare bytes."""

    def match(self, chunk: bytes, target: bytes) -> bool:
        return simple_substr_match(chunk, target)

    def diagnostics(self) -> dict:
        return {}

    def __repr__(self) -> str:
        return "SimpleMatcher()"
