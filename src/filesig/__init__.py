"""Generate RSA-PSS key pairs, sign files, verify detached signatures."""

from .core.exceptions import ConfigError, CryptoError, FileSigError, MalformedKeyError, SigningError
from .crypto import PROFILE, KeyCodec, KeyPair, KeyPairGenerator, Signer, Verifier
from .logging import install_library_default
from .services import SigningSession

__version__ = "0.1.0"

install_library_default()

__all__ = [
    "ConfigError",
    "CryptoError",
    "FileSigError",
    "KeyCodec",
    "KeyPair",
    "KeyPairGenerator",
    "MalformedKeyError",
    "PROFILE",
    "Signer",
    "SigningError",
    "SigningSession",
    "Verifier",
    "__version__",
]
