"""Cryptographic core of ed25519hd."""

from ..crypto.keys import KeyPair, PublicKey, Seed, Signature
from ..crypto.hd import (
    HDNode,
    derive_child,
    derive_key,
    derive_path,
    master_key,
    parse_index,
    parse_path,
)

__all__ = [
    # Keys
    "Seed",
    "PublicKey",
    "Signature",
    "KeyPair",

    # HD derivation
    "HDNode",
    "master_key",
    "derive_child",
    "derive_path",
    "derive_key",
    "parse_index",
    "parse_path",
]
