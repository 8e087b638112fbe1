"""
Paillier decryption: m = L(c^lambda mod n^2) * mu mod n.
"""

import gmpy2

from paillier.common.numbers import Integer
from paillier.common.values import Ciphertext
from paillier.keygen import PrivateKey, PublicKey


def l_function(x: Integer, n: Integer) -> gmpy2.mpz:
    """Implements the Paillier L function: L(x) = (x - 1) // N."""
    return (gmpy2.mpz(x) - 1) // n


def decrypt(c, public_key: PublicKey, private_key: PrivateKey) -> int:
    """
    Decrypts a ciphertext, returning a standard Python int.

    Ciphertexts produced under a different key decrypt to an unrelated
    integer; that case cannot be detected here.

    Raises:
        CiphertextOutOfRangeError: If c is outside [0, n^2).
    """
    ciphertext = Ciphertext.for_key(c, public_key)
    n = gmpy2.mpz(public_key.n)

    u = gmpy2.powmod(ciphertext.value, private_key.lam, public_key.n_square)
    m = (l_function(u, n) * private_key.mu) % n
    return int(m)
