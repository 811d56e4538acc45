from .exceptions import ConfigError, CryptoError, FileSigError, MalformedKeyError, SigningError

__all__ = ["ConfigError", "CryptoError", "FileSigError", "MalformedKeyError", "SigningError"]
