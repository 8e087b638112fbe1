"""
Number-theoretic helpers for the Paillier cryptosystem: the extended
Euclidean algorithm, modular inverses and random sampling. Large-integer
arithmetic is delegated to gmpy2.
"""

from typing import Callable, Optional, Tuple, Union
import logging
import random

import gmpy2

logger = logging.getLogger(__name__)

Integer = Union[int, gmpy2.mpz]

# Above this modulus width the linear scan is far too slow to be useful.
BRUTE_FORCE_WARN_BITS = 32

# OS-backed generator used whenever the caller does not pass one.
SYSTEM_RANDOM = random.SystemRandom()


# --- Modular Arithmetic ---


def extended_gcd(a: Integer, b: Integer) -> Tuple[int, int, int]:
    """
    Computes Bezout coefficients for a and b.

    Iterative form of the extended Euclidean algorithm, so stack depth does
    not grow with the size of the operands.

    Args:
        a: First operand.
        b: Second operand.

    Returns:
        A tuple (g, x, y) with a*x + b*y == g == gcd(a, b). For a == 0 the
        result is (b, 0, 1).
    """
    old_r, r = gmpy2.mpz(a), gmpy2.mpz(b)
    old_x, x = gmpy2.mpz(1), gmpy2.mpz(0)
    old_y, y = gmpy2.mpz(0), gmpy2.mpz(1)

    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x
        old_y, y = y, old_y - quotient * y

    return int(old_r), int(old_x), int(old_y)


def mod_inverse(a: Integer, m: Integer) -> Optional[int]:
    """
    Returns x in [0, m) such that a*x = 1 (mod m), or None when
    gcd(a, m) != 1.
    """
    if m < 1:
        raise ValueError("Modulus must be a positive integer")
    if m == 1:
        return 0

    g, x, _ = extended_gcd(a, m)
    if g != 1:
        return None
    # x may be negative; Python's % already maps it into [0, m).
    return int(x % m)


def brute_force_mod_inverse(a: Integer, m: Integer) -> Optional[int]:
    """
    Reference inverse that scans every candidate in [1, m).

    Gives the same answers as mod_inverse but runs in O(m) time, so it is
    only usable for small moduli.
    """
    if m < 1:
        raise ValueError("Modulus must be a positive integer")
    if m == 1:
        return 0

    m = gmpy2.mpz(m)
    if m.bit_length() > BRUTE_FORCE_WARN_BITS:
        logger.warning(
            "brute_force_mod_inverse called with a %d-bit modulus", m.bit_length()
        )

    a = gmpy2.mpz(a) % m
    for x in range(1, int(m)):
        if (a * x) % m == 1:
            return x
    return None


# --- Random Sampling ---


def random_bytes_func(rng: Optional[random.Random] = None) -> Callable[[int], bytes]:
    """Adapts a random.Random instance to the randfunc(n) -> bytes shape."""
    if rng is None:
        rng = SYSTEM_RANDOM
    return rng.randbytes


def get_random_positive_relatively_prime_int(
    n: Integer, rng: Optional[random.Random] = None
) -> gmpy2.mpz:
    """Returns a random integer x where 0 < x < n and gcd(x, n) == 1."""
    if rng is None:
        rng = SYSTEM_RANDOM
    n = gmpy2.mpz(n)
    while True:
        x = gmpy2.mpz(rng.randrange(1, int(n)))
        if gmpy2.gcd(x, n) == 1:
            return x
