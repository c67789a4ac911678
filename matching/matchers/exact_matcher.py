def exact_match(query: bytes, target: bytes) -> bool:
    """True when both documents are byte-for-byte identical."""
    if len(query) != len(target):
        return False
    return all(q == t for q, t in zip(query, target))


class ExactMatcher:
    """Baseline: compares the whole query document against the whole target."""

    def match(self, query: bytes, target: bytes) -> bool:
        return exact_match(query, target)

    def diagnostics(self) -> dict:
        return {}

    def __repr__(self) -> str:
        return "ExactMatcher()"
