"""Type definitions for ed25519hd."""

from ..types.common import (
    HexStr,
    SecretKeyBytes,
    PublicKeyBytes,
    SignatureBytes,
    ChainCodeBytes,
    DerivationPath,
    DerivedKey,
)

__all__ = [
    "HexStr",
    "SecretKeyBytes",
    "PublicKeyBytes",
    "SignatureBytes",
    "ChainCodeBytes",
    "DerivationPath",
    "DerivedKey",
]
