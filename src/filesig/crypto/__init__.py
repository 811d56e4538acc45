from .codec import KeyCodec
from .keys import KeyPair, KeyPairGenerator
from .profile import PROFILE, SignatureProfile
from .signer import Signer
from .verifier import Verifier

__all__ = [
    "KeyCodec",
    "KeyPair",
    "KeyPairGenerator",
    "PROFILE",
    "SignatureProfile",
    "Signer",
    "Verifier",
]
