"""
Range-checked value types for plaintexts and ciphertexts.

Operations build these through ``for_key`` so that a value outside the
domain of the public key is rejected before any arithmetic happens.
"""

from dataclasses import dataclass
import numbers

from paillier.common.errors import CiphertextOutOfRangeError, PlaintextOutOfRangeError


def _as_int(value) -> int:
    # bool is an Integral subclass but never a meaningful message.
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"Expected an integer, got {type(value).__name__}")
    return int(value)


@dataclass(frozen=True)
class Plaintext:
    """An integer in [0, N-1] for the public key it was checked against."""

    value: int

    @classmethod
    def for_key(cls, value, public_key) -> "Plaintext":
        if isinstance(value, cls):
            value = value.value
        m = _as_int(value)
        if not (0 <= m < public_key.n):
            raise PlaintextOutOfRangeError("Message must be in the range [0, N-1]")
        return cls(m)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class Ciphertext:
    """An integer in [0, N^2-1] for the public key it was checked against."""

    value: int

    @classmethod
    def for_key(cls, value, public_key) -> "Ciphertext":
        if isinstance(value, cls):
            value = value.value
        c = _as_int(value)
        if not (0 <= c < public_key.n_square):
            raise CiphertextOutOfRangeError("Ciphertext must be in the range [0, N^2-1]")
        return cls(c)

    def __int__(self) -> int:
        return self.value
