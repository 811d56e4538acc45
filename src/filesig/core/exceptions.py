from __future__ import annotations

"""Central exception hierarchy"""
class FileSigError(Exception):
    """Base exception for all failures"""


class CryptoError(FileSigError):
    """Raised for cryptographic misuse"""


class MalformedKeyError(CryptoError, ValueError):
    """Raised when armored text cannot be parsed into an RSA public key"""


class SigningError(CryptoError):
    """Raised when a payload cannot be signed"""


class ConfigError(FileSigError, ValueError):
    """Raised when a configuration file is invalid"""
