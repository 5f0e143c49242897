"""Tests for key derivation."""

from streampsk.keys import (
    hmac_sha256,
    hash_sha256,
    derive_subkey,
    encryption_key,
    fulfillment_key,
)
from streampsk.types import ENCRYPTION_KEY_LABEL, FULFILLMENT_KEY_LABEL
from .test_vectors import SHARED_SECRET_HEX


class TestPrimitives:
    """Test HMAC-SHA256 and SHA-256 against published vectors."""

    def test_hmac_sha256_rfc4231_case_2(self) -> None:
        """Short key from RFC 4231 test case 2."""
        mac = hmac_sha256(b"Jefe", b"what do ya want for nothing?")
        assert mac.hex() == "5bdcc146bf60754e6a042426089575c75a003f089d2739839dec58b964ec3843"

    def test_hmac_sha256_rfc4231_case_6(self) -> None:
        """Key longer than the block size from RFC 4231 test case 6."""
        mac = hmac_sha256(
            b"\xaa" * 131,
            b"Test Using Larger Than Block-Size Key - Hash Key First",
        )
        assert mac.hex() == "60e431591ee0b67f0d8a26aacbf5b77f8e0bc6213728c5140546040f0ee37f54"

    def test_hash_sha256(self) -> None:
        """SHA-256 of "abc" from FIPS 180-4."""
        assert hash_sha256(b"abc").hex() == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )


class TestSubkeyDerivation:
    """Test purpose-scoped subkeys."""

    def test_subkey_is_hmac_of_label(self) -> None:
        """A subkey is HMAC-SHA256(secret, label)."""
        secret = bytes.fromhex(SHARED_SECRET_HEX)
        assert derive_subkey(secret, b"label") == hmac_sha256(secret, b"label")

    def test_named_subkeys_use_fixed_labels(self) -> None:
        """encryption_key and fulfillment_key use the protocol labels."""
        secret = bytes.fromhex(SHARED_SECRET_HEX)
        assert encryption_key(secret) == derive_subkey(secret, b"ilp_stream_encryption")
        assert fulfillment_key(secret) == derive_subkey(secret, b"ilp_stream_fulfillment")

    def test_key_independence(self) -> None:
        """Encryption and fulfillment keys differ for the same secret."""
        secret = bytes.fromhex(SHARED_SECRET_HEX)
        enc = derive_subkey(secret, ENCRYPTION_KEY_LABEL)
        ful = derive_subkey(secret, FULFILLMENT_KEY_LABEL)

        assert len(enc) == 32
        assert len(ful) == 32
        assert enc != ful

    def test_arbitrary_secret_length(self) -> None:
        """Secrets of any length derive 32-byte keys."""
        for secret in (b"\x01", bytes(32), bytes(range(200))):
            assert len(encryption_key(secret)) == 32

    def test_deterministic_derivation(self) -> None:
        """Same secret always produces same keys."""
        secret = bytes.fromhex(SHARED_SECRET_HEX)
        assert encryption_key(secret) == encryption_key(secret)
        assert fulfillment_key(secret) == fulfillment_key(secret)
