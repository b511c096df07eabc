import logging
import os
from dataclasses import dataclass, field

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from .errors import EntropySourceUnavailable, InvalidKeyEncoding

PRIVATE_KEY_LENGTH = 32
PUBLIC_KEY_LENGTH = 32
SIGNATURE_LENGTH = 64

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Keypair:
    """Ed25519 keypair in raw representation."""
    public_key: bytes
    private_key: bytes = field(repr=False)


def _load_private_key(private_key: bytes) -> Ed25519PrivateKey:
    try:
        raw = bytes(memoryview(private_key))
    except TypeError as exc:
        raise InvalidKeyEncoding(
            f"Private key must be bytes-like, got {type(private_key).__name__}"
        ) from exc
    if len(raw) != PRIVATE_KEY_LENGTH:
        logger.debug("Rejected private key of length %d", len(raw))
        raise InvalidKeyEncoding(
            f"Ed25519 private key must be {PRIVATE_KEY_LENGTH} bytes, got {len(raw)}",
            length=len(raw),
        )
    try:
        return Ed25519PrivateKey.from_private_bytes(raw)
    except ValueError as exc:
        raise InvalidKeyEncoding(str(exc), length=len(raw)) from exc


def _public_bytes(private_key_obj: Ed25519PrivateKey) -> bytes:
    return private_key_obj.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


def generate_keypair() -> Keypair:
    """
    Generate an Ed25519 keypair from a fresh OS-random seed.
    Returns Keypair with both keys as raw bytes.
    """
    try:
        seed = os.urandom(PRIVATE_KEY_LENGTH)
    except (OSError, NotImplementedError) as exc:
        raise EntropySourceUnavailable("Secure random source is unavailable") from exc
    private_key_obj = Ed25519PrivateKey.from_private_bytes(seed)
    private_bytes = private_key_obj.private_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PrivateFormat.Raw,
        encryption_algorithm=serialization.NoEncryption(),
    )
    logger.debug("Generated Ed25519 keypair")
    return Keypair(public_key=_public_bytes(private_key_obj), private_key=private_bytes)


def derive_public_key(private_key: bytes) -> bytes:
    """Return the raw public key for raw Ed25519 private key bytes."""
    return _public_bytes(_load_private_key(private_key))


def sign(payload: bytes, private_key: bytes) -> bytes:
    """
    Produce a detached Ed25519 signature over payload.

    Signing is deterministic: identical inputs give identical signatures.

    Raises:
        InvalidKeyEncoding: if private_key is not 32 raw bytes.
        TypeError: if payload is not bytes-like.
    """
    private_key_obj = _load_private_key(private_key)
    return private_key_obj.sign(bytes(memoryview(payload)))


def verify_signature(public_key: bytes, payload: bytes, signature: bytes) -> bool:
    """
    Check a detached Ed25519 signature over payload.

    Returns False for a bad signature, a malformed public key or a signature
    of the wrong length.

    Raises:
        TypeError: if any argument is not bytes-like.
    """
    public_raw = bytes(memoryview(public_key))
    payload_raw = bytes(memoryview(payload))
    signature_raw = bytes(memoryview(signature))
    if len(public_raw) != PUBLIC_KEY_LENGTH or len(signature_raw) != SIGNATURE_LENGTH:
        return False
    try:
        pub = Ed25519PublicKey.from_public_bytes(public_raw)
        pub.verify(signature_raw, payload_raw)
        return True
    except (InvalidSignature, ValueError):
        return False
