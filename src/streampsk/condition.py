"""Hash-lock conditions and fulfillments for STREAM PSK.

A fulfillment is HMAC-SHA256 of the packet data under a key derived
from the shared secret; the condition is the SHA-256 of the fulfillment.
Both endpoints compute them independently from the same secret.
"""

from . import entropy
from .keys import fulfillment_key, hash_sha256, hmac_sha256
from .types import DIGEST_SIZE, TOKEN_SIZE


def generate_fulfillment(shared_secret: bytes, data: bytes) -> bytes:
    """Generate the 32-byte fulfillment for data.

    Args:
        shared_secret: The pre-shared secret.
        data: The payload the fulfillment is bound to.

    Returns:
        32-byte fulfillment.
    """
    return hmac_sha256(fulfillment_key(shared_secret), data)


def generate_condition(shared_secret: bytes, data: bytes) -> bytes:
    """Generate the 32-byte condition matching generate_fulfillment.

    Args:
        shared_secret: The pre-shared secret.
        data: The payload the condition is bound to.

    Returns:
        32-byte condition (SHA-256 of the fulfillment).
    """
    return hash_sha256(generate_fulfillment(shared_secret, data))


def random_condition() -> bytes:
    """Return a random 32-byte condition that nobody can fulfill."""
    return entropy.fill(DIGEST_SIZE)


def generate_token() -> bytes:
    """Return a random 18-byte token."""
    return entropy.fill(TOKEN_SIZE)
