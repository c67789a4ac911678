from matching.config import BYTE_ALPHABET, DEFAULT_MODULUS
from matching.errors import InvalidModulus


class FiniteField:
    """
    Modular arithmetic over a prime modulus P.

    All inputs are expected to already lie in [0, P); every result is
    returned in [0, P). The modulus travels with the instance so that
    runs with different moduli never share state.
    """

    def __init__(self, modulus: int = DEFAULT_MODULUS) -> None:
        if isinstance(modulus, bool) or not isinstance(modulus, int):
            raise InvalidModulus(f"modulus must be an integer, got {modulus!r}")
        if modulus <= BYTE_ALPHABET:
            raise InvalidModulus(
                f"modulus must exceed the byte alphabet size {BYTE_ALPHABET}, got {modulus}"
            )
        self.modulus = modulus

    def add(self, a: int, b: int) -> int:
        s = a + b
        return s if s < self.modulus else s - self.modulus

    def sub(self, a: int, b: int) -> int:
        return a - b if a >= b else a - b + self.modulus

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self.modulus

    def pow(self, base: int, exp: int) -> int:
        return pow(base, exp, self.modulus)

    def __repr__(self) -> str:
        return f"FiniteField(modulus={self.modulus})"
