"""
Salted password hashing.

PBKDF2-HMAC-SHA256 with a fixed iteration count and key length. The salt is
used as its hex text (UTF-8 encoded), so stored hashes stay valid across
implementations that treat the salt as a string.
"""

import hashlib
import secrets

PBKDF2_DIGEST = "sha256"
PBKDF2_ITERATIONS = 1000
PBKDF2_KEY_LENGTH = 256
SALT_BYTES = 16


class Pbkdf2Hasher:
    """PasswordHasher implementation backed by hashlib.pbkdf2_hmac."""

    def __init__(
        self,
        iterations: int = PBKDF2_ITERATIONS,
        key_length: int = PBKDF2_KEY_LENGTH,
        digest: str = PBKDF2_DIGEST,
    ):
        self.iterations = iterations
        self.key_length = key_length
        self.digest = digest

    def hash(self, password: str, salt: str) -> str:
        """Derive the hex-encoded hash of ``password`` with ``salt``."""
        derived = hashlib.pbkdf2_hmac(
            self.digest,
            password.encode("utf-8"),
            salt.encode("utf-8"),
            self.iterations,
            dklen=self.key_length,
        )
        return derived.hex()

    def new_salt(self) -> str:
        """Generate a fresh random salt."""
        return secrets.token_hex(SALT_BYTES)

    def verify(self, password: str, salt: str, expected_hash: str) -> bool:
        """Check a plaintext password against a stored hash and salt."""
        return secrets.compare_digest(self.hash(password, salt), expected_hash)
