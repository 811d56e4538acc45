"""The one algorithm profile every key, signature and verifier uses.

Nothing is negotiated or written into the outputs: a verifier elsewhere must
apply exactly these parameters out of band. Changing any field breaks
interoperability with every signature produced before.
"""

from __future__ import annotations

from dataclasses import dataclass

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding


@dataclass(frozen=True)
class SignatureProfile:
    name: str = "RSA-PSS"
    key_size: int = 2048
    public_exponent: int = 65537
    hash_name: str = "SHA256"
    salt_length: int = 32

    @property
    def signature_length(self) -> int:
        return self.key_size // 8

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        if self.hash_name.upper() == "SHA256":
            return hashes.SHA256()
        raise ValueError(f"Unsupported signature hash: {self.hash_name}")

    def padding(self) -> padding.PSS:
        # Salt length is fixed, never padding.PSS.MAX_LENGTH or AUTO
        return padding.PSS(
            mgf=padding.MGF1(self.hash_algorithm()),
            salt_length=self.salt_length,
        )


PROFILE = SignatureProfile()

__all__ = ["PROFILE", "SignatureProfile"]
