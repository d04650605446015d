"""Low-level Ed25519 and HMAC primitives backed by libsodium."""

import hashlib
import hmac

import nacl.bindings
from nacl.exceptions import BadSignatureError, CryptoError as NaclCryptoError

from ..constants import PUBLIC_SIZE, SIGNATURE_SIZE
from ..exceptions import CryptoError
from ..types.common import PublicKeyBytes, SignatureBytes

__all__ = [
    "generate_public_key",
    "sign",
    "verify",
    "hmac_sha512",
    "constant_time_equal",
]


def generate_public_key(secret: bytes) -> PublicKeyBytes:
    """
    Derive the Ed25519 public key for a 32-byte secret.

    Args:
        secret: 32-byte secret key (seed form)

    Returns:
        32-byte public key

    Raises:
        CryptoError: If libsodium rejects the secret
    """
    try:
        public, _ = nacl.bindings.crypto_sign_seed_keypair(secret)
    except (NaclCryptoError, ValueError, TypeError) as e:
        raise CryptoError(f"Public key generation failed: {e}") from e
    return PublicKeyBytes(public[:PUBLIC_SIZE])


def sign(message: bytes, secret: bytes, public: bytes) -> SignatureBytes:
    """
    Create a detached Ed25519 signature.

    libsodium signing keys are ``secret ++ public``; the public half is
    taken as given and not re-derived.

    Args:
        message: Bytes to sign
        secret: 32-byte secret key
        public: 32-byte public key

    Returns:
        64-byte signature

    Raises:
        CryptoError: If signing fails
    """
    try:
        signed = nacl.bindings.crypto_sign(message, secret + public)
    except (NaclCryptoError, ValueError, TypeError) as e:
        raise CryptoError(f"Signing failed: {e}") from e
    return SignatureBytes(signed[:SIGNATURE_SIZE])


def verify(message: bytes, signature: bytes, public: bytes) -> bool:
    """
    Verify a detached Ed25519 signature.

    Args:
        message: Original message
        signature: 64-byte signature
        public: 32-byte public key

    Returns:
        True if signature is valid
    """
    try:
        nacl.bindings.crypto_sign_open(signature + message, public)
        return True
    except BadSignatureError:
        return False


def hmac_sha512(key: bytes, data: bytes) -> bytes:
    """Compute HMAC-SHA512 of ``data`` under ``key``."""
    return hmac.new(key, data, hashlib.sha512).digest()


def constant_time_equal(a: bytes, b: bytes) -> bool:
    """Compare two byte strings without early exit on mismatch."""
    return hmac.compare_digest(a, b)
