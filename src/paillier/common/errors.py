"""
Exception hierarchy shared by the Paillier key generator, encryptor,
decryptor and homomorphic operators.
"""


class PaillierError(Exception):
    """Base exception for Paillier-related errors."""

    pass


class KeyGenerationError(PaillierError):
    """Raised when a prime pair cannot produce a usable private key."""

    pass


class OutOfDomainError(PaillierError, ValueError):
    """Raised when a value lies outside the domain an operation accepts."""

    pass


class PlaintextOutOfRangeError(OutOfDomainError):
    """Raised when a plaintext or scalar is not in [0, N-1]."""

    pass


class CiphertextOutOfRangeError(OutOfDomainError):
    """Raised when a ciphertext is not in [0, N^2-1]."""

    pass


class WrongRandomnessError(PaillierError, ValueError):
    """Raised when provided randomness is cryptographically invalid."""

    pass
