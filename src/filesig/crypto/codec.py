"""Armored text encoding of RSA public keys.

The armor is the usual PEM public key block: DER SubjectPublicKeyInfo, base64
wrapped at 64 characters, between literal BEGIN/END lines.
"""

from __future__ import annotations

import structlog
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ..core.exceptions import MalformedKeyError
from ..utils.b64 import b64d, b64e, wrap_lines

HEADER = "-----BEGIN PUBLIC KEY-----"
FOOTER = "-----END PUBLIC KEY-----"
LINE_WIDTH = 64

log = structlog.get_logger(__name__)


class KeyCodec:
    """Encode/decode public keys; no cryptographic computation happens here"""

    @staticmethod
    def encode(public_key: rsa.RSAPublicKey) -> str:
        der = public_key.public_bytes(
            encoding=serialization.Encoding.DER,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        body = "\n".join(wrap_lines(b64e(der), LINE_WIDTH))
        return f"{HEADER}\n{body}\n{FOOTER}\n"

    @staticmethod
    def decode(armored: str | bytes) -> rsa.RSAPublicKey:
        if isinstance(armored, (bytes, bytearray)):
            try:
                armored = bytes(armored).decode("ascii")
            except UnicodeDecodeError as exc:
                raise MalformedKeyError("Armored key must be ASCII text") from exc
        if not isinstance(armored, str):
            raise MalformedKeyError(f"Expected armored text, got {type(armored).__name__}")

        start = armored.find(HEADER)
        if start < 0:
            raise MalformedKeyError("Missing BEGIN PUBLIC KEY line")
        body_start = start + len(HEADER)
        end = armored.find(FOOTER, body_start)
        if end < 0:
            raise MalformedKeyError("Missing END PUBLIC KEY line")

        body = "".join(armored[body_start:end].split())
        if not body:
            raise MalformedKeyError("Armored key has an empty body")
        try:
            der = b64d(body)
        except ValueError as exc:
            raise MalformedKeyError("Armored key body is not valid base64") from exc

        try:
            key = serialization.load_der_public_key(der)
        except (ValueError, TypeError) as exc:
            # cryptography raises ValueError for any DER it cannot parse
            raise MalformedKeyError("Armored key body is not a valid public key") from exc
        if not isinstance(key, rsa.RSAPublicKey):
            raise MalformedKeyError(f"Expected an RSA public key, got {type(key).__name__}")
        log.debug("public_key.decoded", key_size=key.key_size)
        return key


__all__ = ["FOOTER", "HEADER", "KeyCodec", "LINE_WIDTH"]
