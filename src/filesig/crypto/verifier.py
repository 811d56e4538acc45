"""Signature verification.

Every failure mode (bad armor, bad base64, wrong length, tampered payload,
wrong key) is reported the same way: ``False``. Callers cannot tell
"tampered" from "garbage input" apart, and must not try to.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

import structlog
from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import rsa

from ..core.exceptions import MalformedKeyError
from ..utils.b64 import b64d
from .codec import KeyCodec
from .profile import PROFILE

log = structlog.get_logger(__name__)

PublicKeyLike = Union[rsa.RSAPublicKey, str, bytes]


class Verifier:

    @staticmethod
    def verify(public_key: PublicKeyLike, payload: bytes, signature: str | bytes) -> bool:
        try:
            ok = Verifier._verify(public_key, payload, signature)
        except Exception as exc:  # noqa: BLE001
            log.debug("signature.verify_error", error=type(exc).__name__)
            ok = False
        log.debug("signature.verified", valid=ok)
        return ok

    @staticmethod
    def _verify(public_key: PublicKeyLike, payload: bytes, signature: str | bytes) -> bool:
        if isinstance(public_key, (str, bytes, bytearray)):
            try:
                public_key = KeyCodec.decode(public_key)
            except MalformedKeyError as exc:
                log.debug("signature.bad_key", reason=str(exc))
                return False
        if not isinstance(public_key, rsa.RSAPublicKey):
            return False
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            return False

        if isinstance(signature, str):
            signature = signature.strip()
        try:
            raw = b64d(signature)
        except (ValueError, TypeError):
            log.debug("signature.bad_encoding")
            return False
        if len(raw) != public_key.key_size // 8 or len(raw) != PROFILE.signature_length:
            log.debug("signature.bad_length", length=len(raw))
            return False

        try:
            public_key.verify(raw, bytes(payload), PROFILE.padding(), PROFILE.hash_algorithm())
        except InvalidSignature:
            return False
        return True

    @classmethod
    def verify_file(cls, public_key: PublicKeyLike, path: Path, signature: str | bytes) -> bool:
        try:
            data = Path(path).read_bytes()
        except OSError:
            log.debug("signature.verified", valid=False, reason="unreadable payload")
            return False
        return cls.verify(public_key, data, signature)


__all__ = ["PublicKeyLike", "Verifier"]
