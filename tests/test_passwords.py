"""
Unit tests for salted password hashing.
"""

from recipeapp.modules.auth.passwords import PBKDF2_KEY_LENGTH, Pbkdf2Hasher

# Reference value: crypto.pbkdf2Sync("pw1", KNOWN_SALT, 1000, 256, "sha256") in Node.js
KNOWN_SALT = "5f2b8c0e1d3a4b6c7d8e9f0a1b2c3d4e"
KNOWN_HASH = (
    "b276bd84a4915d2a900028f16e6f69fa6ed7014df348e3afa9cd40388bc8b38a"
    "23904450b1c99a1e344ffe5522ce213cfba637435b8c34243dc50cc06dc43992"
    "84892600a416961051c614d352de096fd19c9a42b4b19c4ba74da3c65ce5e242"
    "34c0f3195d040efa315d21e3570837c4959c12c9a5ee6379be4e0883966cd2db"
    "7bba6aea6639e6fa9434e6bffeda5da0dc2b29600bab2eb3f1b4856742b28e45"
    "98cd031b40ff5c93385d7614d4e12d42a28113bee8dac373973f4943f4b71f3b"
    "377f0233c8decc61e02ea1c7447568f4f58f6b0813450c8cf45cacf166ba5678"
    "865c91b9a487fc8b1bbbd6fa90a6953bc804d8e55a71984af81105709bb6f577"
)


def test_hash_is_deterministic(hasher):
    """Same password and salt always give the same hash."""
    assert hasher.hash("pw1", "abcd") == hasher.hash("pw1", "abcd")


def test_hash_matches_existing_stored_hashes(hasher):
    """Hashes already stored in db.json files still verify."""
    assert hasher.hash("pw1", KNOWN_SALT) == KNOWN_HASH
    assert hasher.verify("pw1", KNOWN_SALT, KNOWN_HASH) is True
    assert len(KNOWN_HASH) == PBKDF2_KEY_LENGTH * 2


def test_single_iteration_prefix_matches_reference_vector():
    """First block of PBKDF2-HMAC-SHA256("password", "salt", 1) is the published value."""
    derived = Pbkdf2Hasher(iterations=1).hash("password", "salt")

    assert derived[:64] == "120fb6cffcf8b32c43e7225256c4f837a86548c92ccc35480805987cb70be17b"


def test_hash_depends_on_salt_and_password(hasher):
    """Changing either input changes the digest."""
    base = hasher.hash("pw1", "salt-a")

    assert hasher.hash("pw1", "salt-b") != base
    assert hasher.hash("pw2", "salt-a") != base


def test_new_salt_is_random_hex(hasher):
    """Salts are 16 random bytes, hex encoded, never repeated."""
    salts = {hasher.new_salt() for _ in range(20)}

    assert len(salts) == 20
    for salt in salts:
        assert len(salt) == 32
        int(salt, 16)


def test_verify():
    """verify() accepts the right password only."""
    hasher = Pbkdf2Hasher(iterations=10, key_length=32)
    stored = hasher.hash("secret", "salt")

    assert hasher.verify("secret", "salt", stored) is True
    assert hasher.verify("Secret", "salt", stored) is False
