import logging

import pytest

from ed25519hd.constants import HARDENED_OFFSET
from ed25519hd.crypto.hd import (
    HDNode,
    derive_child,
    derive_key,
    derive_path,
    master_key,
    parse_index,
    parse_path,
)
from ed25519hd.crypto.keys import KeyPair, Seed
from ed25519hd.exceptions import (
    BadChainCodeLength,
    BadDerivationPath,
    BadPrivateKeyLength,
    BadSeedLength,
)

ZERO_SEED = Seed(bytes(32))

# SLIP-0010 ed25519 test vector 1
SLIP10_SEED = bytes.fromhex("000102030405060708090a0b0c0d0e0f")
SLIP10_VECTORS = [
    (
        "m",
        "90046a93de5380a72b5e45010748567d5ea02bbf6522f979e05c0d8d8ca9fffb",
        "2b4be7f19ee27bbf30c667b642d5f4aa69fd169872f8fc3059c08ebae2eb19e7",
        "a4b2856bfec510abab89753fac1ac0e1112364e7d250545963f135f2a33188ed",
    ),
    (
        "m/0'",
        "8b59aa11380b624e81507a27fedda59fea6d0b779a778918a2fd3590e16e9c69",
        "68e0fe46dfb67e368c75379acec591dad19df3cde26e63b93a8e704f1dade7a3",
        "8c8a13df77a28f3445213a0f432fde644acaa215fc72dcdf300d5efaa85d350c",
    ),
    (
        "m/0'/1'",
        "a320425f77d1b5c2505a6b1b27382b37368ee640e3557c315416801243552f14",
        "b1d0bad404bf35da785a64ca1ac54b2617211d2777696fbffaf208f746ae84f2",
        None,
    ),
]

ZERO_SEED_MASTER_KEY = "71cfe9d91a9be244b0fca6c580228a3e908aeda95f6909f331cde71e0f91d7f7"
ZERO_SEED_MASTER_CHAIN = "05450c8f6793a192bf5217f0763e8c1b1751970a384193e97c155b54a7122012"
STELLAR_PATH = "m/44'/354'/0'/0'/0'"
STELLAR_KEY = "61c8a505dfbd0358d746ed75f806e58a7d608b6cafa20ec8fe1ea135e810a6ad"
STELLAR_CHAIN = "ef9729d5bea15a68979f27309683fbf859fbf3d9d670ac91a9040f7d378162f3"


@pytest.mark.parametrize("path,chain_code,key,public", SLIP10_VECTORS)
def test_slip10_vectors(path, chain_code, key, public):
    derived = derive_key(path, SLIP10_SEED)
    assert derived.key.hex() == key
    assert derived.chain_code.hex() == chain_code
    if public is not None:
        assert KeyPair.from_secret(derived.key).public_key.hex() == public


def test_zero_seed_regression():
    root = master_key(ZERO_SEED)
    assert root.key.hex() == ZERO_SEED_MASTER_KEY
    assert root.chain_code.hex() == ZERO_SEED_MASTER_CHAIN

    key, chain_code = derive_key(STELLAR_PATH, ZERO_SEED)
    assert key.hex() == STELLAR_KEY
    assert chain_code.hex() == STELLAR_CHAIN


def test_derivation_is_deterministic():
    seed = Seed.generate()
    assert derive_key(STELLAR_PATH, seed) == derive_key(STELLAR_PATH, seed)
    assert derive_key(STELLAR_PATH, seed) != derive_key("m/44'/354'/0'/0'/1'", seed)


def test_derive_key_delegates_to_derive_path():
    root = master_key(ZERO_SEED)
    assert derive_key(STELLAR_PATH, ZERO_SEED) == derive_path(STELLAR_PATH, root.key, root.chain_code)
    assert derive_key(STELLAR_PATH, bytes(32)) == derive_key(STELLAR_PATH, ZERO_SEED)


def test_derive_path_continues_from_node():
    parent = derive_key("m/44'/354'", ZERO_SEED)
    child = derive_path("0'/0'/0'", parent.key, parent.chain_code)
    assert child == derive_key(STELLAR_PATH, ZERO_SEED)


def test_hardened_index_encoding():
    assert parse_index("5'") == 0x80000005
    assert parse_index("5") == 0x00000005
    assert parse_index("0'") == HARDENED_OFFSET
    assert parse_index("4294967295") == 0xFFFFFFFF
    assert parse_index("+7") == 7


def test_unparseable_segments_default_to_zero(caplog):
    caplog.set_level(logging.WARNING, logger="ed25519hd.crypto.hd")
    assert parse_index("abc") == 0
    assert parse_index("abc'") == HARDENED_OFFSET
    assert parse_index("-1") == 0
    assert parse_index("4294967296") == 0
    assert parse_index("") == 0
    assert parse_index("5\n") == 0
    assert parse_index(" 5") == 0
    assert "abc" in caplog.text


def test_lenient_paths_match_index_zero():
    assert derive_key("m/abc", ZERO_SEED) == derive_key("m/0", ZERO_SEED)
    assert derive_key("", ZERO_SEED) == derive_key("m/0", ZERO_SEED)
    assert derive_key("m/", ZERO_SEED) == derive_key("m/0", ZERO_SEED)
    assert derive_key("m", ZERO_SEED) == master_key(ZERO_SEED)


def test_strict_mode_rejects_bad_segments():
    with pytest.raises(BadDerivationPath) as info:
        derive_key("m/44'/x", ZERO_SEED, strict=True)
    assert info.value.segment == "x"
    assert info.value.path == "m/44'/x"
    with pytest.raises(BadDerivationPath):
        parse_path("m//0", strict=True)
    with pytest.raises(BadDerivationPath):
        parse_index("5\n", strict=True)
    assert parse_path("m/44'/0", strict=True) == [0x8000002C, 0]


def test_hardened_overflow_rejected():
    with pytest.raises(BadDerivationPath):
        parse_index("2147483648'")
    assert parse_index("2147483647'") == 0xFFFFFFFF


def test_parse_path_skips_root_marker():
    assert parse_path("m/44'/354'/0'/0'/0'") == [
        0x8000002C, 0x80000162, 0x80000000, 0x80000000, 0x80000000,
    ]
    assert parse_path("m") == []
    assert parse_path("0/m/1") == [0, 1]


def test_derive_child_uses_big_endian_index():
    root = master_key(ZERO_SEED)
    hardened = derive_child(root.key, root.chain_code, 0x80000005)
    assert hardened == derive_path("m/5'", root.key, root.chain_code)
    assert hardened != derive_path("m/5", root.key, root.chain_code)


def test_length_validation():
    with pytest.raises(BadSeedLength):
        derive_key("m", bytes(15))
    with pytest.raises(BadSeedLength):
        master_key(bytes(65))
    with pytest.raises(BadPrivateKeyLength):
        derive_path("m/0'", bytes(31), bytes(32))
    with pytest.raises(BadChainCodeLength):
        derive_path("m/0'", bytes(32), bytes(33))


def test_hd_node_matches_functions():
    node = HDNode.from_seed(ZERO_SEED).derive_path(STELLAR_PATH)
    key, chain_code = derive_key(STELLAR_PATH, ZERO_SEED)
    assert node.key == key
    assert node.chain_code == chain_code
    assert node.depth == 5
    assert node.index == HARDENED_OFFSET
    assert node.public_key() == KeyPair.from_secret(key).public_key


def test_hd_node_derive_hardened_flag():
    root = HDNode.from_seed(SLIP10_SEED)
    assert root.derive(0, hardened=True) == root.derive_path("m/0'")
    assert root.derive(0, hardened=True) != root.derive(0)
    with pytest.raises(AttributeError):
        root.depth = 3
