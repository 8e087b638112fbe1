import logging
import math
import random

import gmpy2
import pytest

from paillier.common.numbers import (
    brute_force_mod_inverse,
    extended_gcd,
    get_random_positive_relatively_prime_int,
    mod_inverse,
)


@pytest.mark.parametrize(
    "a, b",
    [(0, 7), (7, 0), (240, 46), (46, 240), (17, 3120), (12, 18), (1, 1), (2**127 - 1, 2**89 - 1)],
)
def test_extended_gcd_bezout_identity(a, b):
    g, x, y = extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


def test_extended_gcd_base_case():
    assert extended_gcd(0, 42) == (42, 0, 1)


def test_extended_gcd_large_operands_do_not_recurse():
    a = 2**4096 + 1
    b = 3**2500
    g, x, y = extended_gcd(a, b)
    assert a * x + b * y == g == math.gcd(a, b)


@pytest.mark.parametrize("a, m", [(3, 11), (10, 17), (17, 3120), (7, 40), (123456789, 2**61 - 1)])
def test_mod_inverse_coprime(a, m):
    inv = mod_inverse(a, m)
    assert inv is not None
    assert 0 <= inv < m
    assert (a * inv) % m == 1


@pytest.mark.parametrize("a, m", [(2, 4), (6, 9), (0, 7), (12, 18)])
def test_mod_inverse_not_coprime_returns_none(a, m):
    assert mod_inverse(a, m) is None


def test_mod_inverse_matches_gmpy2_on_large_values():
    rng = random.Random(1234)
    m = gmpy2.next_prime(2**512)
    for _ in range(20):
        a = rng.randrange(1, int(m))
        assert mod_inverse(a, m) == int(gmpy2.invert(a, m))


def test_mod_inverse_accepts_mpz():
    assert mod_inverse(gmpy2.mpz(3), gmpy2.mpz(11)) == 4


def test_mod_inverse_rejects_non_positive_modulus():
    with pytest.raises(ValueError):
        mod_inverse(3, 0)
    with pytest.raises(ValueError):
        brute_force_mod_inverse(3, -5)


def test_brute_force_agrees_with_extended_euclid():
    for m in range(2, 60):
        for a in range(0, m):
            assert brute_force_mod_inverse(a, m) == mod_inverse(a, m)


def test_brute_force_warns_on_wide_modulus(caplog):
    with caplog.at_level(logging.WARNING, logger="paillier.common.numbers"):
        # a = 1 returns on the first candidate, so the scan stays short.
        assert brute_force_mod_inverse(1, 2**40 - 3) == 1
    assert "40-bit modulus" in caplog.text


def test_random_relatively_prime_int_in_range():
    rng = random.Random(99)
    n = 3 * 5 * 7 * 11
    for _ in range(200):
        x = get_random_positive_relatively_prime_int(n, rng)
        assert 0 < x < n
        assert math.gcd(int(x), n) == 1
