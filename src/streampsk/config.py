"""Configuration for the STREAM PSK codec."""

import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}

STRICT_LENGTH_ENV = "STREAM_PSK_STRICT_LENGTH"


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for envelope decryption."""

    strict_length: bool = False
    """Reject envelopes shorter than nonce + tag (28 bytes) before decrypting.

    Off by default: envelopes of 16-27 bytes are passed on to the cipher
    with a truncated tag and fail authentication, matching peer behavior.
    """

    @classmethod
    def from_env(cls) -> "CodecConfig":
        """Build a config from the STREAM_PSK_STRICT_LENGTH environment variable."""
        raw = os.environ.get(STRICT_LENGTH_ENV, "")
        return cls(strict_length=raw.strip().lower() in _TRUE_VALUES)
