"""Ed25519 key management exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
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
]


class Ed25519Error(Exception):
    """Base exception for all ed25519hd errors."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(Ed25519Error):
    """Raised when input validation fails."""
    pass


class LengthError(ValidationError):
    """Raised when a fixed-size value is built from bytes of the wrong length."""

    kind = "Value"

    def __init__(
        self,
        length: int,
        expected: int,
        message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"{self.kind} must be {expected} bytes, got {length}"
        super().__init__(message)
        self.length = length
        self.expected = expected

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LengthError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.length == other.length
            and self.expected == other.expected
        )

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.length, self.expected))


class BadSeedLength(LengthError):
    """Raised when seed bytes have the wrong length."""

    kind = "Seed"


class BadKeyPairLength(LengthError):
    """Raised when combined key pair bytes have the wrong length."""

    kind = "Key pair"


class BadChainCodeLength(LengthError):
    """Raised when a chain code has the wrong length."""

    kind = "Chain code"


class BadPublicKeyLength(LengthError):
    """Raised when a public key has the wrong length."""

    kind = "Public key"


class BadPrivateKeyLength(LengthError):
    """Raised when a private key has the wrong length."""

    kind = "Private key"


class BadSignatureLength(LengthError):
    """Raised when a signature has the wrong length."""

    kind = "Signature"


class BadDerivationPath(ValidationError):
    """Raised when a derivation path segment cannot be turned into an index."""

    def __init__(
        self,
        path: str,
        segment: str,
        message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"Invalid segment {segment!r} in derivation path {path!r}"
        super().__init__(message, data=segment)
        self.path = path
        self.segment = segment


class CryptoError(Ed25519Error):
    """Raised when a cryptographic operation fails."""
    pass


class RandomGeneratorError(CryptoError):
    """Raised when the system random generator fails."""

    def __init__(self, code: int, message: Optional[str] = None) -> None:
        if message is None:
            message = "System random generator failed"
        super().__init__(message, code=code)
