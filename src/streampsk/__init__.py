"""
stream-psk - Pre-shared key cryptography for STREAM

Python implementation of the STREAM PSK primitives: HMAC-SHA256 hash-lock
conditions and fulfillments, and AES-256-GCM payload encryption.
"""

import logging

from .keys import (
    hmac_sha256,
    hash_sha256,
    derive_subkey,
    encryption_key,
    fulfillment_key,
)
from .entropy import fill
from .condition import (
    generate_fulfillment,
    generate_condition,
    random_condition,
    generate_token,
)
from .envelope import (
    StreamEnvelope,
    encode_envelope,
    decode_envelope,
    seal_to_envelope,
    is_stream_envelope,
)
from .crypto import encrypt, encrypt_with_nonce, decrypt
from .config import CodecConfig
from .types import (
    NONCE_SIZE,
    TAG_SIZE,
    KEY_SIZE,
    DIGEST_SIZE,
    TOKEN_SIZE,
    ENVELOPE_OVERHEAD,
    MIN_ENVELOPE_SIZE,
    ENCRYPTION_KEY_LABEL,
    FULFILLMENT_KEY_LABEL,
    StreamCryptoError,
    FormatError,
    AuthenticationError,
    FatalCryptoError,
)

logging.getLogger("streampsk").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Keys
    "hmac_sha256",
    "hash_sha256",
    "derive_subkey",
    "encryption_key",
    "fulfillment_key",
    # Entropy
    "fill",
    # Conditions
    "generate_fulfillment",
    "generate_condition",
    "random_condition",
    "generate_token",
    # Envelope
    "StreamEnvelope",
    "encode_envelope",
    "decode_envelope",
    "seal_to_envelope",
    "is_stream_envelope",
    # Crypto
    "encrypt",
    "encrypt_with_nonce",
    "decrypt",
    # Config
    "CodecConfig",
    # Constants
    "NONCE_SIZE",
    "TAG_SIZE",
    "KEY_SIZE",
    "DIGEST_SIZE",
    "TOKEN_SIZE",
    "ENVELOPE_OVERHEAD",
    "MIN_ENVELOPE_SIZE",
    "ENCRYPTION_KEY_LABEL",
    "FULFILLMENT_KEY_LABEL",
    # Errors
    "StreamCryptoError",
    "FormatError",
    "AuthenticationError",
    "FatalCryptoError",
]
