# Single-owner slot for the current key pair of a signing session.
from __future__ import annotations

import threading

import structlog

from ..core.exceptions import SigningError
from ..crypto.codec import KeyCodec
from ..crypto.keys import KeyPair, KeyPairGenerator
from ..crypto.signer import Signer

log = structlog.get_logger(__name__)


class SigningSession:
    """Owns at most one KeyPair.

    ``generate()`` replaces the pair as a whole; a concurrent ``sign()`` sees
    either the previous pair or the new one, never a mix. The private key never
    leaves this object except to the signer.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._keypair: KeyPair | None = None

    @property
    def has_keypair(self) -> bool:
        with self._lock:
            return self._keypair is not None

    @property
    def public_key_armor(self) -> str | None:
        with self._lock:
            kp = self._keypair
        return KeyCodec.encode(kp.public_key) if kp else None

    def generate(self) -> str:
        """Create a fresh pair, install it, and return its armored public key"""
        # Key generation runs outside the lock; only the swap is guarded
        kp = KeyPairGenerator.generate()
        self.install(kp)
        return KeyCodec.encode(kp.public_key)

    def install(self, kp: KeyPair) -> None:
        with self._lock:
            replaced = self._keypair is not None
            self._keypair = kp
        log.info("session.keypair_installed", replaced=replaced)

    def sign(self, payload: bytes) -> str:
        with self._lock:
            kp = self._keypair
        if kp is None:
            raise SigningError("No key pair generated in this session")
        return Signer.sign(kp.private_key, payload)

    def clear(self) -> None:
        with self._lock:
            self._keypair = None
