"""Key derivation for STREAM PSK."""

from cryptography.hazmat.primitives import hmac
from cryptography.hazmat.primitives.hashes import SHA256, Hash

from .types import ENCRYPTION_KEY_LABEL, FULFILLMENT_KEY_LABEL


def hmac_sha256(key: bytes, message: bytes) -> bytes:
    """
    Compute HMAC-SHA256 of a message.

    Args:
        key: Secret key of any length
        message: Message to authenticate

    Returns:
        32-byte MAC
    """
    h = hmac.HMAC(key, SHA256())
    h.update(message)
    return h.finalize()


def hash_sha256(preimage: bytes) -> bytes:
    """Return the 32-byte SHA-256 digest of the preimage."""
    digest = Hash(SHA256())
    digest.update(preimage)
    return digest.finalize()


def derive_subkey(shared_secret: bytes, purpose_label: bytes) -> bytes:
    """
    Derive a purpose-scoped 32-byte key from the shared secret.

    Distinct labels yield independent keys from the same secret.

    Args:
        shared_secret: The pre-shared secret (32 bytes by convention)
        purpose_label: Domain separation label

    Returns:
        32-byte subkey
    """
    return hmac_sha256(shared_secret, purpose_label)


def encryption_key(shared_secret: bytes) -> bytes:
    """Derive the AES-256-GCM key for payload encryption."""
    return derive_subkey(shared_secret, ENCRYPTION_KEY_LABEL)


def fulfillment_key(shared_secret: bytes) -> bytes:
    """Derive the HMAC key used to generate fulfillments."""
    return derive_subkey(shared_secret, FULFILLMENT_KEY_LABEL)
