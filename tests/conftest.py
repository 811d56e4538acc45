from __future__ import annotations

import pytest

from filesig.crypto.keys import KeyPair, KeyPairGenerator


# RSA-2048 generation is slow; share two independent pairs across the run.
@pytest.fixture(scope="session")
def keypair() -> KeyPair:
    return KeyPairGenerator.generate()


@pytest.fixture(scope="session")
def other_keypair() -> KeyPair:
    return KeyPairGenerator.generate()
