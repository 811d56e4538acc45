# RSA-PSS key pair generation.
from __future__ import annotations

from dataclasses import dataclass, field

import structlog
from cryptography.hazmat.primitives.asymmetric import rsa

from .profile import PROFILE

log = structlog.get_logger(__name__)


@dataclass(frozen=True, slots=True)
class KeyPair:
    """Private/public halves generated together; never re-paired"""
    private_key: rsa.RSAPrivateKey = field(repr=False)
    public_key: rsa.RSAPublicKey = field(repr=False)

    def __repr__(self) -> str:
        return f"KeyPair(alg={PROFILE.name}, bits={self.public_key.key_size})"


class KeyPairGenerator:
    """Produces fresh pairs for the fixed profile.

    The only entropy source is the OS CSPRNG behind ``cryptography``; callers
    cannot supply a seed.
    """

    @staticmethod
    def generate() -> KeyPair:
        priv = rsa.generate_private_key(
            public_exponent=PROFILE.public_exponent,
            key_size=PROFILE.key_size,
        )
        log.info("keypair.generated", alg=PROFILE.name, bits=PROFILE.key_size)
        return KeyPair(private_key=priv, public_key=priv.public_key())


__all__ = ["KeyPair", "KeyPairGenerator"]
