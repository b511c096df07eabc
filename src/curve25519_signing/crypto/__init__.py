from .errors import EntropySourceUnavailable, InvalidKeyEncoding, SigningError
from .ed25519 import (
    PRIVATE_KEY_LENGTH,
    PUBLIC_KEY_LENGTH,
    SIGNATURE_LENGTH,
    Keypair,
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
    "PRIVATE_KEY_LENGTH",
    "PUBLIC_KEY_LENGTH",
    "SIGNATURE_LENGTH",
    "SigningError",
    "EntropySourceUnavailable",
    "InvalidKeyEncoding",
]
