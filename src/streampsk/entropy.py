"""Secure random bytes from the operating system."""

import os

from .types import abort


def fill(n: int) -> bytes:
    """
    Return n cryptographically secure random bytes.

    Failure of the OS entropy source is fatal: nonces and conditions
    must never be predictable.

    Args:
        n: Number of bytes to return

    Returns:
        n random bytes

    Raises:
        ValueError: If n is negative
        FatalCryptoError: If the OS cannot supply randomness
    """
    if n < 0:
        raise ValueError(f"Byte count must be non-negative, got {n}")

    try:
        return os.urandom(n)
    except (OSError, NotImplementedError) as e:
        abort("Failed to securely generate random bytes", e)
