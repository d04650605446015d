"""Encoding and decoding utilities for ed25519hd."""

from typing import Union

from ..constants import INDEX_SIZE, MAX_INDEX
from ..exceptions import ValidationError
from ..types.common import HexStr

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "to_bytes",
    "index_to_bytes",
]


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.

    Args:
        hex_str: Hex string with or without 0x prefix

    Returns:
        Decoded bytes

    Raises:
        ValidationError: If hex string is invalid
    """
    try:
        # Remove 0x prefix if present
        if isinstance(hex_str, str) and hex_str.startswith("0x"):
            hex_str = hex_str[2:]
        return bytes.fromhex(hex_str)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"Invalid hex string: {hex_str}") from e


def bytes_to_hex(data: bytes, prefix: bool = False) -> HexStr:
    """
    Convert bytes to hex string.

    Args:
        data: Bytes to encode
        prefix: Add 0x prefix

    Returns:
        Hex string
    """
    hex_str = data.hex()
    if prefix:
        hex_str = f"0x{hex_str}"
    return HexStr(hex_str)


def to_bytes(data: Union[bytes, bytearray, memoryview, str]) -> bytes:
    """
    Normalize bytes-like or hex input to immutable bytes.

    Args:
        data: Raw bytes or hex string

    Returns:
        Bytes copy of the input

    Raises:
        ValidationError: If input is neither bytes-like nor valid hex
    """
    if isinstance(data, str):
        return hex_to_bytes(data)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise ValidationError(f"Expected bytes or hex string, got {type(data).__name__}")


def index_to_bytes(index: int) -> bytes:
    """
    Serialize a child index as 4 big-endian bytes.

    Args:
        index: Index in range 0..2**32-1

    Returns:
        Encoded index

    Raises:
        ValidationError: If index does not fit in 32 bits
    """
    if not 0 <= index <= MAX_INDEX:
        raise ValidationError(f"Index out of range: {index}")
    return index.to_bytes(INDEX_SIZE, byteorder="big")
