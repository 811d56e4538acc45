from __future__ import annotations

from pathlib import Path

import structlog
from cryptography.hazmat.primitives.asymmetric import rsa

from ..core.exceptions import SigningError
from ..utils.b64 import b64e
from .profile import PROFILE

log = structlog.get_logger(__name__)


def _as_payload(payload: object) -> bytes:
    if isinstance(payload, bytes):
        return payload
    if isinstance(payload, (bytearray, memoryview)):
        return bytes(payload)
    raise SigningError(f"Payload must be bytes, got {type(payload).__name__}")


class Signer:
    """RSA-PSS signer with the fixed profile; normalizes error handling"""

    @staticmethod
    def sign(private_key: rsa.RSAPrivateKey | None, payload: bytes) -> str:
        if private_key is None:
            raise SigningError("Signing requested without private key material")
        if not isinstance(private_key, rsa.RSAPrivateKey):
            raise SigningError(f"Expected an RSA private key, got {type(private_key).__name__}")
        if (
            private_key.key_size != PROFILE.key_size
            or private_key.public_key().public_numbers().e != PROFILE.public_exponent
        ):
            raise SigningError(
                f"Key is outside the {PROFILE.name} profile "
                f"(need {PROFILE.key_size} bits, e={PROFILE.public_exponent})"
            )
        data = _as_payload(payload)
        try:
            raw = private_key.sign(data, PROFILE.padding(), PROFILE.hash_algorithm())
        except (ValueError, TypeError) as exc:
            raise SigningError("RSA-PSS signing failed") from exc
        log.info("payload.signed", size=len(data))
        return b64e(raw)

    @classmethod
    def sign_file(cls, private_key: rsa.RSAPrivateKey | None, path: Path) -> str:
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise SigningError(f"Cannot read payload file {path}") from exc
        return cls.sign(private_key, data)


__all__ = ["Signer"]
