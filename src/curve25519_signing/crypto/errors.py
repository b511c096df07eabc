from typing import Optional


class SigningError(Exception):
    """Base class for errors raised by curve25519_signing."""


class EntropySourceUnavailable(SigningError):
    """Raised when the secure random source cannot supply key material."""


class InvalidKeyEncoding(SigningError, ValueError):
    """Raised when a private key is not a raw 32-byte Ed25519 key."""

    def __init__(self, message: str, length: Optional[int] = None) -> None:
        super().__init__(message)
        self.length = length
