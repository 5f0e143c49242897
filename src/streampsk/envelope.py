"""Envelope encoding and decoding for STREAM PSK encryption."""

from dataclasses import dataclass

from .types import (
    NONCE_SIZE,
    TAG_SIZE,
    ENVELOPE_OVERHEAD,
    MIN_ENVELOPE_SIZE,
    FormatError,
)


@dataclass(frozen=True)
class StreamEnvelope:
    """
    Encrypted STREAM payload.

    Wire format (28-byte overhead + ciphertext):
        [0..11]   nonce (12 bytes)
        [12..27]  authentication tag (16 bytes)
        [28..]    ciphertext (plaintext length)
    """

    nonce: bytes  # 12 bytes
    tag: bytes  # 16 bytes; shorter only when decoded leniently
    ciphertext: bytes  # variable

    @property
    def sealed(self) -> bytes:
        """Ciphertext followed by tag, as AES-GCM expects to open it."""
        return self.ciphertext + self.tag


def seal_to_envelope(nonce: bytes, sealed: bytes) -> StreamEnvelope:
    """
    Split AES-GCM output (ciphertext || tag) into an envelope.

    Args:
        nonce: 12-byte nonce used to seal
        sealed: Output of the AEAD seal operation

    Returns:
        StreamEnvelope with the tag moved ahead of the ciphertext

    Raises:
        ValueError: If sealed is shorter than a tag
    """
    if len(sealed) < TAG_SIZE:
        raise ValueError(f"Sealed data must be at least {TAG_SIZE} bytes, got {len(sealed)}")

    body_length = len(sealed) - TAG_SIZE
    return StreamEnvelope(
        nonce=nonce,
        tag=sealed[body_length:],
        ciphertext=sealed[:body_length],
    )


def encode_envelope(envelope: StreamEnvelope) -> bytes:
    """
    Encode an envelope to bytes.

    Args:
        envelope: StreamEnvelope to encode

    Returns:
        nonce || tag || ciphertext
    """
    return envelope.nonce + envelope.tag + envelope.ciphertext


def decode_envelope(data: bytes, strict: bool = False) -> StreamEnvelope:
    """
    Decode bytes into an envelope.

    Anything shorter than a tag is rejected. In the default lenient mode
    an envelope of 16 to 27 bytes decodes with a truncated tag and empty
    ciphertext, which then fails authentication; peers rely on that
    behavior. With strict=True those envelopes are rejected here instead.

    Args:
        data: Encoded envelope bytes
        strict: Require the full 28-byte nonce and tag overhead

    Returns:
        Decoded StreamEnvelope

    Raises:
        FormatError: If data is too short
    """
    minimum = ENVELOPE_OVERHEAD if strict else MIN_ENVELOPE_SIZE
    if len(data) < minimum:
        raise FormatError(f"Envelope too short: {len(data)} bytes (minimum {minimum})")

    data = bytes(data)
    return StreamEnvelope(
        nonce=data[:NONCE_SIZE],
        tag=data[NONCE_SIZE:ENVELOPE_OVERHEAD],
        ciphertext=data[ENVELOPE_OVERHEAD:],
    )


def is_stream_envelope(data: bytes) -> bool:
    """
    Check if data is long enough to be a complete envelope.

    Args:
        data: Bytes to check

    Returns:
        True if data holds at least a nonce and a full tag
    """
    return len(data) >= ENVELOPE_OVERHEAD
