"""Constants for Ed25519 key management and HD derivation."""

__all__ = [
    "SECRET_SIZE",
    "PUBLIC_SIZE",
    "KEYPAIR_SIZE",
    "SIGNATURE_SIZE",
    "SEED_SIZE",
    "CHAIN_CODE_SIZE",
    "MIN_HD_SEED_SIZE",
    "MAX_HD_SEED_SIZE",
    "INDEX_SIZE",
    "HARDENED_OFFSET",
    "MAX_INDEX",
    "ED25519_SEED_KEY",
    "PRIVATE_DERIVATION_PREFIX",
    "ROOT_MARKER",
    "PATH_SEPARATOR",
    "HARDENED_MARKER",
]

# Binary layouts (bytes)
SECRET_SIZE = 32
PUBLIC_SIZE = 32
KEYPAIR_SIZE = SECRET_SIZE + PUBLIC_SIZE
SIGNATURE_SIZE = 64
SEED_SIZE = 32
CHAIN_CODE_SIZE = 32

# Raw seeds accepted as HD master input (128 to 512 bits)
MIN_HD_SEED_SIZE = 16
MAX_HD_SEED_SIZE = 64

# Child indexes
INDEX_SIZE = 4
HARDENED_OFFSET = 0x80000000
MAX_INDEX = 0xFFFFFFFF

# HMAC key for the master node
ED25519_SEED_KEY = b"ed25519 seed"

# Private-key derivation mode marker
PRIVATE_DERIVATION_PREFIX = b"\x00"

# Path syntax
ROOT_MARKER = "m"
PATH_SEPARATOR = "/"
HARDENED_MARKER = "'"
