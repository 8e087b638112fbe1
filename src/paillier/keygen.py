"""
Key generation for the Paillier cryptosystem.

Primes come from pycryptodome's getPrime; all other large-integer
arithmetic goes through gmpy2. Both primes share the same bit length, which
is what makes the simple generator g = n + 1 valid.
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Optional, Tuple
import logging
import random
import time

from Crypto.Util.number import getPrime
import gmpy2

from paillier.common.errors import KeyGenerationError
from paillier.common.numbers import Integer, mod_inverse, random_bytes_func

logger = logging.getLogger(__name__)

DEFAULT_BIT_SIZE = 1024
MIN_BIT_SIZE = 3


# --- Key Classes ---


@dataclass(frozen=True)
class PublicKey:
    """
    Public part of a Paillier key pair: the modulus n and the generator g.

    Safe to copy and share. Plaintexts live in [0, n) and ciphertexts in
    [0, n^2).
    """

    n: int
    g: int

    @cached_property
    def n_square(self) -> int:
        """Returns N*N, cached for efficiency."""
        return self.n * self.n


@dataclass(frozen=True)
class PrivateKey:
    """
    Private part of a Paillier key pair.

    lam is (p-1)(q-1) and mu is its inverse modulo n^2. Neither value is
    shown in the repr.
    """

    lam: int = field(repr=False)
    mu: int = field(repr=False)


# --- Key Derivation Steps ---


def generate_prime_pair(
    bit_size: int, rng: Optional[random.Random] = None
) -> Tuple[int, int]:
    """
    Samples two distinct primes of exactly ``bit_size`` bits each.

    Args:
        bit_size: Bit length of each prime.
        rng: Source of randomness; a seeded random.Random gives a
            reproducible pair.

    Returns:
        The pair (p, q) as Python integers.
    """
    if bit_size < MIN_BIT_SIZE:
        raise ValueError(f"bit_size must be at least {MIN_BIT_SIZE}")

    randfunc = random_bytes_func(rng)
    p = getPrime(bit_size, randfunc=randfunc)
    q = getPrime(bit_size, randfunc=randfunc)
    while p == q:
        logger.debug("Prime collision at %d bits, drawing q again", bit_size)
        q = getPrime(bit_size, randfunc=randfunc)
    return int(p), int(q)


def carmichael_function(p: Integer, q: Integer) -> int:
    """
    Returns (p-1)(q-1) as the private exponent.

    This is the product rather than lcm(p-1, q-1); decryption stays exact
    because mu is derived from this same value.
    """
    return int((gmpy2.mpz(p) - 1) * (gmpy2.mpz(q) - 1))


def simple_generator(n: Integer) -> int:
    """Returns g = n + 1, a valid generator when p and q share a bit length."""
    return int(n) + 1


def compute_mu(lam: Integer, n: Integer) -> int:
    """
    Returns the inverse of lam modulo n^2.

    Raises:
        KeyGenerationError: If lam and n^2 are not coprime.
    """
    n_square = gmpy2.mpz(n) * gmpy2.mpz(n)
    mu = mod_inverse(lam, n_square)
    if mu is None:
        raise KeyGenerationError("lambda has no modular inverse modulo N^2")
    return mu


# --- Key Generation ---


def key_gen(
    bit_size: int = DEFAULT_BIT_SIZE, rng: Optional[random.Random] = None
) -> Tuple[PublicKey, PrivateKey]:
    """
    Generates a Paillier key pair.

    Args:
        bit_size: Bit length of each of the two primes; the modulus n is
            roughly twice as wide.
        rng: Source of randomness for prime sampling.

    Returns:
        A tuple of (public_key, private_key).

    Raises:
        ValueError: If bit_size is below MIN_BIT_SIZE.
        KeyGenerationError: If the sampled primes do not yield an invertible
            lambda.
    """
    logger.debug("Generating Paillier key pair with %d-bit primes", bit_size)
    start = time.perf_counter()

    p, q = generate_prime_pair(bit_size, rng)
    n = p * q
    lam = carmichael_function(p, q)
    g = simple_generator(n)
    mu = compute_mu(lam, n)

    logger.debug(
        "Generated %d-bit modulus in %.3fs",
        n.bit_length(),
        time.perf_counter() - start,
    )
    return PublicKey(n=n, g=g), PrivateKey(lam=lam, mu=mu)
