"""
ed25519hd

Ed25519 key pairs, signing and verification, with SLIP-0010 style
hierarchical deterministic key derivation.
"""

from .constants import (
    SECRET_SIZE,
    PUBLIC_SIZE,
    KEYPAIR_SIZE,
    SIGNATURE_SIZE,
    SEED_SIZE,
    CHAIN_CODE_SIZE,
    HARDENED_OFFSET,
)
from .exceptions import (
    Ed25519Error,
    ValidationError,
    LengthError,
    BadSeedLength,
    BadKeyPairLength,
    BadChainCodeLength,
    BadPublicKeyLength,
    BadPrivateKeyLength,
    BadSignatureLength,
    BadDerivationPath,
    CryptoError,
    RandomGeneratorError,
)
from .crypto import (
    Seed,
    PublicKey,
    Signature,
    KeyPair,
    HDNode,
    derive_key,
    derive_path,
)
from .types import DerivedKey

__version__ = "1.0.0"

__all__ = [
    # Sizes
    "SECRET_SIZE",
    "PUBLIC_SIZE",
    "KEYPAIR_SIZE",
    "SIGNATURE_SIZE",
    "SEED_SIZE",
    "CHAIN_CODE_SIZE",
    "HARDENED_OFFSET",

    # Exceptions
    "Ed25519Error",
    "ValidationError",
    "LengthError",
    "BadSeedLength",
    "BadKeyPairLength",
    "BadChainCodeLength",
    "BadPublicKeyLength",
    "BadPrivateKeyLength",
    "BadSignatureLength",
    "BadDerivationPath",
    "CryptoError",
    "RandomGeneratorError",

    # Keys
    "Seed",
    "PublicKey",
    "Signature",
    "KeyPair",

    # HD derivation
    "HDNode",
    "DerivedKey",
    "derive_key",
    "derive_path",
]
