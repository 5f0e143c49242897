"""Type definitions and protocol constants for STREAM PSK cryptography."""

import logging
from typing import NoReturn, Optional

logger = logging.getLogger("streampsk")

# Protocol constants
NONCE_SIZE = 12
TAG_SIZE = 16
KEY_SIZE = 32  # AES-256
DIGEST_SIZE = 32
TOKEN_SIZE = 18
ENVELOPE_OVERHEAD = NONCE_SIZE + TAG_SIZE
MIN_ENVELOPE_SIZE = TAG_SIZE

# Domain separation labels
ENCRYPTION_KEY_LABEL = b"ilp_stream_encryption"
FULFILLMENT_KEY_LABEL = b"ilp_stream_fulfillment"


# Exception types
class StreamCryptoError(Exception):
    """Base exception for recoverable STREAM crypto errors."""
    pass


class FormatError(StreamCryptoError):
    """Envelope is too short or otherwise malformed."""
    pass


class AuthenticationError(StreamCryptoError):
    """Envelope failed authentication."""

    def __init__(self) -> None:
        # Same message for every cause
        super().__init__("Envelope authentication failed")


class FatalCryptoError(BaseException):
    """Security invariants can no longer be upheld.

    Derives from BaseException so that ``except Exception`` handlers
    do not swallow it; the process is expected to stop.
    """
    pass


def abort(reason: str, cause: Optional[BaseException] = None) -> NoReturn:
    """Log a fatal condition and raise FatalCryptoError.

    Args:
        reason: Short description of what failed. Must not contain
            key material or payload bytes.
        cause: The underlying exception, chained onto the fatal error.

    Raises:
        FatalCryptoError: Always.
    """
    logger.critical("Fatal crypto failure: %s", reason)
    raise FatalCryptoError(reason) from cause
