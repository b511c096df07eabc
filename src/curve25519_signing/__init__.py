"""
Ed25519 signing core: keypair generation and detached signatures over raw bytes.

The crypto operations never read configuration or environment variables;
``curve25519_signing.config`` only drives logging setup.
"""

from .crypto import (
    EntropySourceUnavailable,
    InvalidKeyEncoding,
    Keypair,
    SigningError,
    derive_public_key,
    generate_keypair,
    sign,
    verify_signature,
)

__all__ = [
    "Keypair",
    "generate_keypair",
    "sign",
    "derive_public_key",
    "verify_signature",
    "SigningError",
    "EntropySourceUnavailable",
    "InvalidKeyEncoding",
    "config",
    "crypto",
    "utils",
]
