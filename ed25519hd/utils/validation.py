"""Validation utilities for ed25519hd."""

import re
from typing import Type, Union

from ..constants import (
    CHAIN_CODE_SIZE,
    KEYPAIR_SIZE,
    MAX_HD_SEED_SIZE,
    MIN_HD_SEED_SIZE,
    PUBLIC_SIZE,
    SECRET_SIZE,
    SEED_SIZE,
    SIGNATURE_SIZE,
)
from ..exceptions import (
    BadChainCodeLength,
    BadKeyPairLength,
    BadPrivateKeyLength,
    BadPublicKeyLength,
    BadSeedLength,
    BadSignatureLength,
    LengthError,
    ValidationError,
)
from ..utils.encoding import to_bytes

__all__ = [
    "validate_length",
    "validate_seed",
    "validate_hd_seed",
    "validate_private_key",
    "validate_public_key",
    "validate_keypair",
    "validate_signature",
    "validate_chain_code",
]

HEX_PATTERN = re.compile(r"^(0x)?[0-9a-fA-F]*$")

BytesLike = Union[bytes, bytearray, memoryview, str]


def validate_length(
    data: BytesLike,
    expected: int,
    error: Type[LengthError]
) -> bytes:
    """
    Normalize input and check it has exactly the expected length.

    Args:
        data: Raw bytes or hex string
        expected: Required length in bytes
        error: LengthError subclass raised on mismatch

    Returns:
        Input as bytes

    Raises:
        ValidationError: If a hex string is malformed
        LengthError: If length does not match (as ``error``)
    """
    if isinstance(data, str) and not HEX_PATTERN.match(data):
        raise ValidationError(f"{error.kind} must be hexadecimal")
    raw = to_bytes(data)
    if len(raw) != expected:
        raise error(len(raw), expected)
    return raw


def validate_seed(seed: BytesLike) -> bytes:
    """Validate a 32-byte key pair seed."""
    return validate_length(seed, SEED_SIZE, BadSeedLength)


def validate_hd_seed(seed: BytesLike) -> bytes:
    """
    Validate raw HD master seed bytes.

    BIP39 seeds are 64 bytes and SLIP-0010 vectors use 16, so any length
    in that range is accepted.

    Args:
        seed: Raw seed bytes or hex string

    Returns:
        Seed as bytes

    Raises:
        BadSeedLength: If seed is shorter than 16 or longer than 64 bytes
    """
    raw = to_bytes(seed)
    if not MIN_HD_SEED_SIZE <= len(raw) <= MAX_HD_SEED_SIZE:
        bound = MIN_HD_SEED_SIZE if len(raw) < MIN_HD_SEED_SIZE else MAX_HD_SEED_SIZE
        raise BadSeedLength(
            len(raw),
            bound,
            f"Seed must be between {MIN_HD_SEED_SIZE} and {MAX_HD_SEED_SIZE} bytes, got {len(raw)}"
        )
    return raw


def validate_private_key(key: BytesLike) -> bytes:
    """Validate a 32-byte secret key."""
    return validate_length(key, SECRET_SIZE, BadPrivateKeyLength)


def validate_public_key(key: BytesLike) -> bytes:
    """Validate a 32-byte public key."""
    return validate_length(key, PUBLIC_SIZE, BadPublicKeyLength)


def validate_keypair(raw: BytesLike) -> bytes:
    """Validate 64 bytes of secret ++ public key material."""
    return validate_length(raw, KEYPAIR_SIZE, BadKeyPairLength)


def validate_signature(signature: BytesLike) -> bytes:
    """Validate a 64-byte signature."""
    return validate_length(signature, SIGNATURE_SIZE, BadSignatureLength)


def validate_chain_code(chain_code: BytesLike) -> bytes:
    """Validate a 32-byte chain code."""
    return validate_length(chain_code, CHAIN_CODE_SIZE, BadChainCodeLength)
