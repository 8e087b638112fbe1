"""
Homomorphic operations on Paillier ciphertexts.

Only the public key is needed. Ciphertexts must all come from that key;
mixing keys yields meaningless results rather than an error.
"""

from typing import Iterable, Optional
import logging
import random

import gmpy2

from paillier.common.numbers import get_random_positive_relatively_prime_int
from paillier.common.values import Ciphertext, Plaintext
from paillier.keygen import PublicKey

logger = logging.getLogger(__name__)


def homomorphic_add(c1, c2, public_key: PublicKey) -> int:
    """Homomorphically adds two ciphertexts: D(c1 * c2) = m1 + m2 mod n."""
    a = Ciphertext.for_key(c1, public_key)
    b = Ciphertext.for_key(c2, public_key)
    c = (gmpy2.mpz(a.value) * b.value) % public_key.n_square
    return int(c)


def homomorphic_multiply(c, k, public_key: PublicKey) -> int:
    """Homomorphically multiplies a ciphertext by a plaintext scalar k."""
    ciphertext = Ciphertext.for_key(c, public_key)
    scalar = Plaintext.for_key(k, public_key)
    return int(gmpy2.powmod(ciphertext.value, scalar.value, public_key.n_square))


def homomorphic_add_plain(c, m, public_key: PublicKey) -> int:
    """Adds a plaintext to an encrypted value without encrypting it first."""
    ciphertext = Ciphertext.for_key(c, public_key)
    plaintext = Plaintext.for_key(m, public_key)
    gm = gmpy2.powmod(public_key.g, plaintext.value, public_key.n_square)
    return int((gm * ciphertext.value) % public_key.n_square)


def homomorphic_sum(ciphertexts: Iterable, public_key: PublicKey) -> int:
    """
    Folds homomorphic_add over ``ciphertexts``.

    An empty iterable gives 1, the trivial encryption of zero.
    """
    total = 1
    count = 0
    for c in ciphertexts:
        total = homomorphic_add(total, c, public_key)
        count += 1
    logger.debug("Aggregated %d ciphertexts", count)
    return total


def rerandomize(c, public_key: PublicKey, rng: Optional[random.Random] = None) -> int:
    """
    Multiplies a ciphertext by a fresh r^n so the result decrypts to the
    same plaintext but cannot be linked to the input.
    """
    ciphertext = Ciphertext.for_key(c, public_key)
    r = get_random_positive_relatively_prime_int(public_key.n, rng)
    rn = gmpy2.powmod(r, public_key.n, public_key.n_square)
    return int((rn * ciphertext.value) % public_key.n_square)
