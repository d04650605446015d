"""
ed25519hd Usage Examples

This file demonstrates key features of the ed25519hd library.
"""

import logging

from ed25519hd import (
    BadKeyPairLength,
    HDNode,
    KeyPair,
    Seed,
    derive_key,
)
from ed25519hd.crypto import parse_path

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def keypair_example():
    """Example 1: Key pair creation, signing and verification."""
    print("\n=== Key Pair Example ===")

    pair = KeyPair.generate()
    print(f"Public key: {pair.public_key.hex()}")

    message = b"hello ed25519"
    signature = pair.sign(message)
    print(f"Signature: {signature.hex()}")
    print(f"Valid: {pair.verify(message, signature)}")
    print(f"Valid for other message: {pair.verify(b'other', signature)}")

    # Restore from stored raw material
    restored = KeyPair.from_raw_unchecked(pair.raw)
    print(f"Restored equals original: {restored == pair}")

    try:
        KeyPair.from_raw_unchecked(pair.raw[:-1])
    except BadKeyPairLength as e:
        print(f"Rejected truncated pair: {e}")


def derivation_example():
    """Example 2: Hierarchical key derivation."""
    print("\n=== HD Derivation Example ===")

    seed = Seed(bytes(32))
    path = "m/44'/354'/0'/0'/0'"
    print(f"Path indexes: {[hex(i) for i in parse_path(path)]}")

    key, chain_code = derive_key(path, seed)
    print(f"Key: {key.hex()}")
    print(f"Chain code: {chain_code.hex()}")

    pair = KeyPair.from_secret(key)
    print(f"Public key: {pair.public_key.hex()}")

    # Same result through the node API
    node = HDNode.from_seed(seed).derive_path(path)
    print(f"Node: {node}, same key: {node.key == key}")

    # Lenient segment parsing falls back to index 0
    lenient, _ = derive_key("m/abc", seed)
    zero, _ = derive_key("m/0", seed)
    print(f"'abc' derives like '0': {lenient == zero}")


if __name__ == "__main__":
    keypair_example()
    derivation_example()
