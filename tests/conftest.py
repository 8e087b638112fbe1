"""Shared pytest fixtures for the Paillier test suite."""

import pytest

from paillier.keygen import key_gen


@pytest.fixture(scope="session")
def keypair():
    """A 256-bit-prime key pair reused across tests to keep the suite fast."""
    return key_gen(256)


@pytest.fixture(scope="session")
def keypair_512():
    return key_gen(512)


@pytest.fixture()
def public_key(keypair):
    return keypair[0]


@pytest.fixture()
def private_key(keypair):
    return keypair[1]
