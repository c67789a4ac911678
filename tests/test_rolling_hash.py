import random

import pytest

from matching.algorithms.finite_field import FiniteField
from matching.algorithms.rolling_hash import RollingHash, iter_window_hashes, window_hash
from matching.errors import InvalidLength


def test_window_hash_is_base_256_polynomial():
    f = FiniteField()
    assert window_hash(b"a", 1, f) == 97
    assert window_hash(b"ab", 2, f) == 97 * 256 + 98
    assert window_hash(b"xabc", 3, f, start=1) == (97 * 256 + 98) * 256 + 99


def test_init_hashes_first_window_and_base_exp():
    f = FiniteField(1000003)
    rh = RollingHash(b"hello world", 5, f)
    assert rh.value == window_hash(b"hello", 5, f)
    assert rh.base_exp == pow(256, 4, 1000003)
    assert rh.k == 5


def test_init_rejects_short_sequence():
    with pytest.raises(InvalidLength):
        RollingHash(b"abc", 4)


def test_init_rejects_non_positive_window():
    with pytest.raises(InvalidLength):
        RollingHash(b"abc", 0)


@pytest.mark.parametrize("modulus", [257, 1000003, 5003943032159437])
@pytest.mark.parametrize("k", [1, 2, 7, 20])
def test_advance_agrees_with_direct_hash(modulus, k):
    rng = random.Random(modulus + k)
    data = bytes(rng.randrange(256) for _ in range(200))
    f = FiniteField(modulus)
    rolled = list(iter_window_hashes(data, k, f))
    assert len(rolled) == len(data) - k + 1
    for i, h in enumerate(rolled):
        assert h == window_hash(data, k, f, start=i)
        assert 0 <= h < modulus


def test_roll_handles_underflow_before_multiply():
    # hash 254 minus outgoing contribution 256 wraps below zero
    f = FiniteField(257)
    data = b"\x01\xff\x00"
    rh = RollingHash(data, 2, f)
    assert rh.advance(data[0], data[2]) == window_hash(data, 2, f, start=1)


def test_iter_window_hashes_short_sequence_is_empty():
    assert list(iter_window_hashes(b"ab", 3)) == []


def test_iter_window_hashes_single_window():
    f = FiniteField()
    assert list(iter_window_hashes(b"abc", 3, f)) == [window_hash(b"abc", 3, f)]
