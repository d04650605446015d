"""Common type definitions for ed25519hd."""

from typing import NamedTuple, NewType

__all__ = [
    "HexStr",
    "SecretKeyBytes",
    "PublicKeyBytes",
    "SignatureBytes",
    "ChainCodeBytes",
    "DerivationPath",
    "DerivedKey",
]

# Basic types
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

# Crypto types
SecretKeyBytes = NewType("SecretKeyBytes", bytes)
"""32-byte Ed25519 secret key (seed form)."""

PublicKeyBytes = NewType("PublicKeyBytes", bytes)
"""32-byte Ed25519 public key."""

SignatureBytes = NewType("SignatureBytes", bytes)
"""64-byte Ed25519 signature."""

ChainCodeBytes = NewType("ChainCodeBytes", bytes)
"""32-byte HD chain code."""

DerivationPath = NewType("DerivationPath", str)
"""Path like m/44'/354'/0'/0'/0'."""


class DerivedKey(NamedTuple):
    """Result of an HD derivation step."""

    key: SecretKeyBytes
    chain_code: ChainCodeBytes
