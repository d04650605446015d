"""Encoding and validation helpers for ed25519hd."""
