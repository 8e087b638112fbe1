"""
Paillier encryption: c = g^m * r^n mod n^2 with fresh randomness r per call.
"""

from typing import Optional, Tuple
import logging
import random

import gmpy2

from paillier.common.errors import WrongRandomnessError
from paillier.common.numbers import Integer, get_random_positive_relatively_prime_int
from paillier.common.values import Plaintext
from paillier.keygen import PublicKey

logger = logging.getLogger(__name__)


def _encrypt_raw(m: int, r: gmpy2.mpz, public_key: PublicKey) -> int:
    n_square = gmpy2.mpz(public_key.n_square)
    gm = gmpy2.powmod(public_key.g, m, n_square)
    rn = gmpy2.powmod(r, public_key.n, n_square)
    return int((gm * rn) % n_square)


def encrypt_and_return_randomness(
    m, public_key: PublicKey, rng: Optional[random.Random] = None
) -> Tuple[int, int]:
    """Encrypts a message and returns the ciphertext and randomness used."""
    plaintext = Plaintext.for_key(m, public_key)
    r = get_random_positive_relatively_prime_int(public_key.n, rng)
    logger.debug("Encrypting under a %d-bit modulus", public_key.n.bit_length())
    return _encrypt_raw(plaintext.value, r, public_key), int(r)


def encrypt(m, public_key: PublicKey, rng: Optional[random.Random] = None) -> int:
    """
    Encrypts a plaintext in [0, n) under ``public_key``.

    Each call draws new randomness, so encrypting the same message twice
    gives different ciphertexts.

    Raises:
        PlaintextOutOfRangeError: If m is outside [0, n).
    """
    c, _ = encrypt_and_return_randomness(m, public_key, rng)
    return c


def encrypt_with_randomness(m, r: Integer, public_key: PublicKey) -> int:
    """Encrypts a message using a specified random value ``r``."""
    plaintext = Plaintext.for_key(m, public_key)
    r_mpz = gmpy2.mpz(r)
    if not (0 < r_mpz < public_key.n and gmpy2.gcd(r_mpz, public_key.n) == 1):
        raise WrongRandomnessError(
            "Randomness must be a positive integer relatively prime to N"
        )
    return _encrypt_raw(plaintext.value, r_mpz, public_key)
