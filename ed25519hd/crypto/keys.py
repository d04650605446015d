"""Key management for Ed25519."""

import logging
import secrets
from typing import Union

from ..constants import SECRET_SIZE, SEED_SIZE
from ..exceptions import RandomGeneratorError
from ..types.common import HexStr, PublicKeyBytes, SecretKeyBytes, SignatureBytes
from ..utils.encoding import bytes_to_hex, hex_to_bytes
from ..utils.validation import (
    validate_keypair,
    validate_private_key,
    validate_public_key,
    validate_seed,
    validate_signature,
)
from . import primitives

__all__ = ["Seed", "PublicKey", "Signature", "KeyPair"]

logger = logging.getLogger(__name__)

Message = Union[bytes, bytearray, memoryview, str]


def _message_bytes(message: Message) -> bytes:
    if isinstance(message, str):
        return message.encode("utf-8")
    return bytes(message)


class _FixedBytes:
    """Immutable fixed-length byte value."""

    __slots__ = ("_data",)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _set(self, data: bytes) -> None:
        object.__setattr__(self, "_data", data)

    @classmethod
    def from_hex(cls, hex_str: str):
        """
        Create value from hex string.

        Args:
            hex_str: Hex string with or without 0x prefix

        Raises:
            ValidationError: If hex string is invalid
            LengthError: If decoded bytes have the wrong length
        """
        return cls(hex_to_bytes(hex_str))

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def hex(self) -> HexStr:
        """Get value as hex string."""
        return bytes_to_hex(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex()})"


class Seed(_FixedBytes):
    """
    32-byte Ed25519 seed.

    The seed is the secret key itself in this scheme.
    """

    __slots__ = ()

    def __init__(self, seed: Union[bytes, str]) -> None:
        """
        Initialize seed.

        Args:
            seed: Seed as 32 bytes or hex string

        Raises:
            BadSeedLength: If seed is not 32 bytes
        """
        self._set(validate_seed(seed))

    @classmethod
    def generate(cls) -> "Seed":
        """
        Create new random seed.

        Returns:
            New Seed instance

        Raises:
            RandomGeneratorError: If the OS random source fails
        """
        try:
            data = secrets.token_bytes(SEED_SIZE)
        except OSError as e:
            raise RandomGeneratorError(e.errno or -1, f"System random generator failed: {e}") from e
        return cls(data)

    @property
    def seed(self) -> bytes:
        """Get seed as bytes."""
        return self._data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Seed):
            return NotImplemented
        return primitives.constant_time_equal(self._data, other._data)

    def __hash__(self) -> int:
        return super().__hash__()

    def __repr__(self) -> str:
        hex_str = self.hex()
        return f"Seed({hex_str[:4]}...{hex_str[-4:]})"


class Signature(_FixedBytes):
    """64-byte Ed25519 signature."""

    __slots__ = ()

    def __init__(self, signature: Union[bytes, str, "Signature"]) -> None:
        """
        Initialize signature.

        Args:
            signature: Signature as 64 bytes, hex string, or another Signature

        Raises:
            BadSignatureLength: If signature is not 64 bytes
        """
        if isinstance(signature, Signature):
            signature = signature._data
        self._set(SignatureBytes(validate_signature(signature)))

    @property
    def signature(self) -> SignatureBytes:
        """Get signature as bytes."""
        return self._data


class PublicKey(_FixedBytes):
    """
    32-byte Ed25519 public key.

    Can be used on its own to verify signatures.
    """

    __slots__ = ()

    def __init__(self, key: Union[bytes, str, "PublicKey"]) -> None:
        """
        Initialize public key.

        Args:
            key: Public key as 32 bytes, hex string, or another PublicKey

        Raises:
            BadPublicKeyLength: If key is not 32 bytes
        """
        if isinstance(key, PublicKey):
            key = key._data
        self._set(PublicKeyBytes(validate_public_key(key)))

    @property
    def key(self) -> PublicKeyBytes:
        """Get public key as bytes."""
        return self._data

    def verify(self, message: Message, signature: Union[Signature, bytes, str]) -> bool:
        """
        Verify signature.

        Args:
            message: Signed message (str is UTF-8 encoded)
            signature: Signature or 64 raw bytes

        Returns:
            True if signature is valid

        Raises:
            BadSignatureLength: If raw signature bytes are not 64 bytes
        """
        if not isinstance(signature, Signature):
            signature = Signature(signature)
        return primitives.verify(_message_bytes(message), bytes(signature), self._data)


class KeyPair:
    """
    Ed25519 key pair.

    Holds a 32-byte secret key and its public key. Every constructor
    except :meth:`from_raw_unchecked` derives the public key from the
    secret, so the two always match.
    """

    __slots__ = ("_secret", "_public")

    def __init__(self, secret: Union[bytes, str]) -> None:
        """
        Initialize key pair from a secret key.

        Args:
            secret: Secret key as 32 bytes or hex string

        Raises:
            BadPrivateKeyLength: If secret is not 32 bytes
        """
        raw = SecretKeyBytes(validate_private_key(secret))
        public = PublicKey(primitives.generate_public_key(raw))
        self._init(raw, public)

    def _init(self, secret: SecretKeyBytes, public: PublicKey) -> None:
        object.__setattr__(self, "_secret", secret)
        object.__setattr__(self, "_public", public)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("KeyPair is immutable")

    @classmethod
    def _from_parts(cls, secret: SecretKeyBytes, public: PublicKey) -> "KeyPair":
        pair = cls.__new__(cls)
        pair._init(secret, public)
        return pair

    @classmethod
    def from_seed(cls, seed: Seed) -> "KeyPair":
        """
        Create key pair from seed.

        Args:
            seed: 32-byte seed; its bytes become the secret key

        Returns:
            New KeyPair instance
        """
        return cls(seed.seed)

    @classmethod
    def from_secret(cls, raw_secret: Union[bytes, str]) -> "KeyPair":
        """
        Create key pair from a raw secret key, deriving the public key.

        Args:
            raw_secret: 32-byte secret key

        Returns:
            New KeyPair instance

        Raises:
            BadPrivateKeyLength: If secret is not 32 bytes
        """
        return cls(raw_secret)

    @classmethod
    def from_hex(cls, hex_str: str) -> "KeyPair":
        """
        Create key pair from a hex encoded secret key.

        Args:
            hex_str: 64 hex characters, with or without 0x prefix

        Returns:
            New KeyPair instance

        Raises:
            ValidationError: If hex string is invalid
            BadPrivateKeyLength: If decoded secret is not 32 bytes
        """
        return cls(hex_to_bytes(hex_str))

    @classmethod
    def from_raw_unchecked(cls, raw: Union[bytes, str]) -> "KeyPair":
        """
        Restore key pair from secret ++ public bytes.

        Both halves are taken verbatim. The public key is NOT re-derived,
        so a mismatched pair is accepted; use only for material that was
        validated when it was stored.

        Args:
            raw: 64 bytes, secret key followed by public key

        Returns:
            New KeyPair instance

        Raises:
            BadKeyPairLength: If raw is not 64 bytes
        """
        data = validate_keypair(raw)
        logger.debug("Restoring key pair from unchecked raw material")
        return cls._from_parts(
            SecretKeyBytes(data[:SECRET_SIZE]),
            PublicKey(data[SECRET_SIZE:]),
        )

    @classmethod
    def generate(cls) -> "KeyPair":
        """
        Create new random key pair.

        Raises:
            RandomGeneratorError: If the OS random source fails
        """
        return cls.from_seed(Seed.generate())

    @property
    def public_key(self) -> PublicKey:
        """Get public key."""
        return self._public

    @property
    def raw(self) -> bytes:
        """Get secret key followed by public key (64 bytes)."""
        return self._secret + self._public.key

    @property
    def raw_secret(self) -> SecretKeyBytes:
        """Get secret key as bytes."""
        return self._secret

    def sign(self, message: Message) -> Signature:
        """
        Sign message.

        Ed25519 signing is deterministic: the same key and message always
        produce the same signature.

        Args:
            message: Message to sign (str is UTF-8 encoded)

        Returns:
            64-byte Signature

        Raises:
            CryptoError: If signing fails
        """
        return Signature(
            primitives.sign(_message_bytes(message), self._secret, self._public.key)
        )

    def verify(self, message: Message, signature: Union[Signature, bytes, str]) -> bool:
        """
        Verify signature against this pair's public key.

        Args:
            message: Signed message
            signature: Signature or 64 raw bytes

        Returns:
            True if signature is valid
        """
        return self._public.verify(message, signature)

    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, KeyPair):
            return NotImplemented
        same_secret = primitives.constant_time_equal(self._secret, other._secret)
        return same_secret and self._public == other._public

    def __hash__(self) -> int:
        return hash((self._secret, self._public))

    def __repr__(self) -> str:
        """String representation."""
        # Secret never shown
        return f"KeyPair(public={self._public.hex()})"
