import pytest

from matching.algorithms.finite_field import FiniteField
from matching.config import DEFAULT_MODULUS
from matching.errors import InvalidModulus, MatchingError


def test_default_modulus():
    assert FiniteField().modulus == DEFAULT_MODULUS


def test_add_wraps_at_modulus():
    f = FiniteField(1009)
    assert f.add(500, 400) == 900
    assert f.add(1000, 9) == 0
    assert f.add(1008, 1008) == 1007


def test_sub_never_goes_negative():
    f = FiniteField(1009)
    assert f.sub(10, 3) == 7
    assert f.sub(3, 10) == 1002
    assert f.sub(0, 1008) == 1


def test_mul_reduces():
    f = FiniteField(1009)
    assert f.mul(1008, 1008) == 1
    p = DEFAULT_MODULUS
    big = FiniteField()
    assert big.mul(p - 1, p - 1) == 1


@pytest.mark.parametrize("a,b", [(0, 0), (1, 1008), (123, 456), (1008, 1008)])
def test_results_stay_in_range(a, b):
    f = FiniteField(1009)
    for r in (f.add(a, b), f.sub(a, b), f.sub(b, a), f.mul(a, b)):
        assert 0 <= r < 1009


@pytest.mark.parametrize("modulus", [0, 100, 256, -7, "1009", 1009.0, True])
def test_invalid_modulus(modulus):
    with pytest.raises(InvalidModulus):
        FiniteField(modulus)


def test_invalid_modulus_is_a_value_error():
    with pytest.raises(ValueError):
        FiniteField(2)
    assert issubclass(InvalidModulus, MatchingError)


def test_smallest_accepted_modulus():
    assert FiniteField(257).modulus == 257


def test_pow_matches_modular_exponent():
    f = FiniteField(1009)
    assert f.pow(256, 0) == 1
    assert f.pow(256, 19) == pow(256, 19, 1009)
