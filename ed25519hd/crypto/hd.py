"""Hierarchical Deterministic key derivation for Ed25519 (SLIP-0010 style)."""

import logging
import re
from typing import List, Optional, Union

from ..constants import (
    ED25519_SEED_KEY,
    HARDENED_MARKER,
    HARDENED_OFFSET,
    MAX_INDEX,
    PATH_SEPARATOR,
    PRIVATE_DERIVATION_PREFIX,
    ROOT_MARKER,
    SECRET_SIZE,
)
from ..exceptions import BadDerivationPath
from ..types.common import ChainCodeBytes, DerivationPath, DerivedKey, SecretKeyBytes
from ..utils.encoding import index_to_bytes
from ..utils.validation import validate_chain_code, validate_hd_seed, validate_private_key
from .keys import KeyPair, PublicKey, Seed
from .primitives import constant_time_equal, hmac_sha512

__all__ = [
    "parse_index",
    "parse_path",
    "master_key",
    "derive_child",
    "derive_path",
    "derive_key",
    "HDNode",
]

logger = logging.getLogger(__name__)

UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")


def _parse_unsigned(text: str) -> Optional[int]:
    """Parse an unsigned 32-bit decimal, None if it does not fit."""
    if not UNSIGNED_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value > MAX_INDEX:
        return None
    return value


def parse_index(
    segment: str,
    strict: bool = False,
    path: Optional[DerivationPath] = None
) -> int:
    """
    Convert one path segment into a child index.

    ``"5'"`` is hardened and becomes ``0x80000005``; ``"5"`` stays ``5``.
    Unparseable numbers fall back to 0 unless ``strict`` is set.

    Args:
        segment: Path segment without separators
        strict: Raise instead of falling back to 0
        path: Full path, used in error messages

    Returns:
        32-bit child index

    Raises:
        BadDerivationPath: If strict and the segment is not a number, or
            if a hardened number is too large to carry the hardened bit
    """
    full_path = segment if path is None else path
    hardened = HARDENED_MARKER in segment
    digits = segment.replace(HARDENED_MARKER, "") if hardened else segment

    value = _parse_unsigned(digits)
    if value is None:
        if strict:
            raise BadDerivationPath(full_path, segment)
        logger.warning(f"Unparseable path segment {segment!r}, using index 0")
        value = 0

    if not hardened:
        return value

    if value >= HARDENED_OFFSET:
        raise BadDerivationPath(
            full_path,
            segment,
            f"Hardened index {value} in {full_path!r} must be below {HARDENED_OFFSET:#x}"
        )
    return value + HARDENED_OFFSET


def parse_path(path: DerivationPath, strict: bool = False) -> List[int]:
    """
    Convert a derivation path like m/44'/354'/0'/0'/0' into indexes.

    Segments equal to ``m`` are skipped wherever they appear. Empty
    segments are kept and parse like any other unparseable number.

    Args:
        path: Slash separated derivation path
        strict: Reject unparseable segments

    Returns:
        Ordered list of 32-bit child indexes
    """
    return [
        parse_index(segment, strict=strict, path=path)
        for segment in path.split(PATH_SEPARATOR)
        if segment != ROOT_MARKER
    ]


def master_key(seed: Union[Seed, bytes, str]) -> DerivedKey:
    """
    Compute the master key and chain code for a seed.

    Args:
        seed: Seed instance, or raw seed of 16 to 64 bytes

    Returns:
        (key, chain_code) for the root node

    Raises:
        BadSeedLength: If raw seed length is out of range
    """
    raw = seed.seed if isinstance(seed, Seed) else validate_hd_seed(seed)
    digest = hmac_sha512(ED25519_SEED_KEY, raw)
    return DerivedKey(
        SecretKeyBytes(digest[:SECRET_SIZE]),
        ChainCodeBytes(digest[SECRET_SIZE:]),
    )


def derive_child(key: bytes, chain_code: bytes, index: int) -> DerivedKey:
    """
    Derive one child step.

    Always private derivation: HMAC-SHA512 keyed by the parent chain code
    over ``0x00 || key || index`` (index big-endian).

    Args:
        key: 32-byte parent key
        chain_code: 32-byte parent chain code
        index: Child index, hardened bit included

    Returns:
        (key, chain_code) of the child
    """
    data = PRIVATE_DERIVATION_PREFIX + key + index_to_bytes(index)
    digest = hmac_sha512(chain_code, data)
    return DerivedKey(
        SecretKeyBytes(digest[:SECRET_SIZE]),
        ChainCodeBytes(digest[SECRET_SIZE:]),
    )


def derive_path(
    path: DerivationPath,
    key: Union[bytes, str],
    chain_code: Union[bytes, str],
    strict: bool = False
) -> DerivedKey:
    """
    Walk a derivation path starting from a key and chain code.

    Args:
        path: Derivation path
        key: 32-byte starting key
        chain_code: 32-byte starting chain code
        strict: Reject unparseable path segments

    Returns:
        (key, chain_code) at the end of the path

    Raises:
        BadPrivateKeyLength: If key is not 32 bytes
        BadChainCodeLength: If chain code is not 32 bytes
        BadDerivationPath: If a segment is rejected
    """
    node = DerivedKey(
        SecretKeyBytes(validate_private_key(key)),
        ChainCodeBytes(validate_chain_code(chain_code)),
    )
    indexes = parse_path(path, strict=strict)
    logger.debug(f"Deriving {len(indexes)} level(s) for path {path!r}")

    for index in indexes:
        node = derive_child(node.key, node.chain_code, index)
    return node


def derive_key(
    path: DerivationPath,
    seed: Union[Seed, bytes, str],
    strict: bool = False
) -> DerivedKey:
    """
    Derive key and chain code for a path from a seed.

    Args:
        path: Derivation path like m/44'/354'/0'/0'/0'
        seed: Seed instance, or raw seed of 16 to 64 bytes
        strict: Reject unparseable path segments

    Returns:
        (key, chain_code) at the end of the path

    Example:
        >>> key, chain_code = derive_key("m/44'/354'/0'/0'/0'", seed)
        >>> pair = KeyPair.from_secret(key)
    """
    root = master_key(seed)
    return derive_path(path, root.key, root.chain_code, strict=strict)


class HDNode:
    """HD wallet node (SLIP-0010 ed25519)."""

    __slots__ = ("key", "chain_code", "depth", "index")

    def __init__(
        self,
        key: bytes,
        chain_code: bytes,
        depth: int = 0,
        index: int = 0
    ):
        object.__setattr__(self, "key", SecretKeyBytes(validate_private_key(key)))
        object.__setattr__(self, "chain_code", ChainCodeBytes(validate_chain_code(chain_code)))
        object.__setattr__(self, "depth", depth)
        object.__setattr__(self, "index", index)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("HDNode is immutable")

    @classmethod
    def from_seed(cls, seed: Union[Seed, bytes, str]) -> "HDNode":
        """Create master node from seed."""
        root = master_key(seed)
        return cls(root.key, root.chain_code)

    def derive(self, index: int, hardened: bool = False) -> "HDNode":
        """Derive child node."""
        if hardened:
            index |= HARDENED_OFFSET
        child = derive_child(self.key, self.chain_code, index)
        return HDNode(child.key, child.chain_code, depth=self.depth + 1, index=index)

    def derive_path(self, path: DerivationPath, strict: bool = False) -> "HDNode":
        """Derive using a path like m/44'/354'/0'/0'/0'."""
        node = self
        for index in parse_path(path, strict=strict):
            node = node.derive(index)
        return node

    def keypair(self) -> KeyPair:
        """Get key pair for this node's key."""
        return KeyPair.from_secret(self.key)

    def public_key(self) -> PublicKey:
        """Get public key for this node's key."""
        return self.keypair().public_key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HDNode):
            return NotImplemented
        return (
            constant_time_equal(self.key, other.key)
            and self.chain_code == other.chain_code
            and self.depth == other.depth
            and self.index == other.index
        )

    def __hash__(self) -> int:
        return hash((self.key, self.chain_code, self.depth, self.index))

    def __repr__(self) -> str:
        return f"HDNode(depth={self.depth}, index={self.index:#x})"
