"""Authentication interfaces following Black Box Design principles."""
from typing import Protocol, Optional, Tuple
from dataclasses import dataclass


@dataclass(frozen=True)
class TokenPayload:
    """Identity carried inside a bearer token."""
    id: int
    username: str


class PasswordHasher(Protocol):
    """Protocol for salted password hashing - allows swappable implementations."""

    def hash(self, password: str, salt: str) -> str:
        """
        Derive a hash from a password and salt.

        Args:
            password: Plaintext password
            salt: Per-user salt

        Returns:
            Hex-encoded digest; identical inputs always give identical output
        """
        ...

    def new_salt(self) -> str:
        """Generate a fresh random salt, hex-encoded."""
        ...

    def verify(self, password: str, salt: str, expected_hash: str) -> bool:
        """Check a plaintext password against a stored hash and salt."""
        ...


class TokenIssuer(Protocol):
    """Protocol for issuing bearer tokens."""

    def issue(self, user_id: int, username: str) -> str:
        """
        Issue a signed, time-limited token for a user.

        Returns:
            Compact token string
        """
        ...


class TokenValidator(Protocol):
    """Protocol for token validation - allows swappable implementations."""

    def verify(self, token: str) -> Tuple[bool, Optional[TokenPayload]]:
        """
        Validate a token.

        Args:
            token: Token string (with or without Bearer prefix)

        Returns:
            Tuple of (is_valid, payload or None)
        """
        ...
