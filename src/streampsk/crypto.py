"""Encryption and decryption for STREAM PSK payloads.

Payloads are sealed with AES-256-GCM under a key derived from the shared
secret, with empty associated data. The envelope carries the tag before
the ciphertext; see envelope.StreamEnvelope for the layout.

Security Note:
    Never log secrets, keys, plaintext or ciphertext. Decryption failures
    are logged with the envelope length only.
"""

import logging
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from . import entropy
from .config import CodecConfig
from .envelope import decode_envelope, encode_envelope, seal_to_envelope
from .keys import encryption_key
from .types import KEY_SIZE, NONCE_SIZE, AuthenticationError, FormatError, abort

logger = logging.getLogger("streampsk.crypto")


def _cipher(shared_secret: bytes) -> AESGCM:
    """Build the AES-256-GCM cipher for a shared secret."""
    key = encryption_key(shared_secret)
    if len(key) != KEY_SIZE:
        abort(f"Derived key must be {KEY_SIZE} bytes")
    try:
        return AESGCM(key)
    except (ValueError, TypeError) as e:
        abort("Failed to create AES-256-GCM key from derived key material", e)


def encrypt(shared_secret: bytes, plaintext: bytes) -> bytes:
    """
    Encrypt a payload with a fresh random nonce.

    Args:
        shared_secret: The pre-shared secret
        plaintext: Payload to encrypt (may be empty)

    Returns:
        Envelope bytes: nonce || tag || ciphertext

    Raises:
        FatalCryptoError: If no randomness is available
    """
    nonce = entropy.fill(NONCE_SIZE)
    return encrypt_with_nonce(shared_secret, plaintext, nonce)


def encrypt_with_nonce(shared_secret: bytes, plaintext: bytes, nonce: bytes) -> bytes:
    """
    Encrypt a payload with a caller-supplied nonce.

    Only for reproducing fixed test vectors. Reusing a nonce under the
    same shared secret breaks AES-GCM; use encrypt() everywhere else.

    Args:
        shared_secret: The pre-shared secret
        plaintext: Payload to encrypt
        nonce: 12-byte nonce

    Returns:
        Envelope bytes: nonce || tag || ciphertext

    Raises:
        ValueError: If nonce is not 12 bytes
    """
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"Nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")

    nonce = bytes(nonce)
    sealed = _cipher(shared_secret).encrypt(nonce, bytes(plaintext), None)
    return encode_envelope(seal_to_envelope(nonce, sealed))


def decrypt(
    shared_secret: bytes,
    envelope: bytes,
    config: Optional[CodecConfig] = None,
) -> bytes:
    """
    Decrypt and authenticate an envelope.

    Args:
        shared_secret: The pre-shared secret
        envelope: Envelope bytes as produced by encrypt()
        config: Codec configuration; lenient when omitted

    Returns:
        Decrypted plaintext

    Raises:
        FormatError: If the envelope is too short to decode
        AuthenticationError: If the envelope does not authenticate
    """
    if config is None:
        config = CodecConfig()

    try:
        parsed = decode_envelope(envelope, strict=config.strict_length)
    except FormatError:
        logger.debug("Rejected envelope of %d bytes", len(envelope))
        raise

    cipher = _cipher(shared_secret)
    try:
        return cipher.decrypt(parsed.nonce, parsed.sealed, None)
    except InvalidTag:
        logger.debug("Rejected envelope of %d bytes", len(envelope))
        raise AuthenticationError() from None
