"""
JWT Token Service implementing TokenIssuer and TokenValidator interfaces.

This module follows Black Box Design principles:
- Implements the TokenIssuer and TokenValidator protocols
- Accepts the secret and configuration via dependency injection
- Never raises on a bad token; verification returns a definite reject
"""

import logging
import time
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import jwt

from .interfaces import TokenPayload
from ...config.provider import TokenConfig

logger = logging.getLogger(__name__)

# Tokens are always HMAC-SHA256 signed
TOKEN_ALGORITHM = "HS256"


def load_secret(path: str) -> bytes:
    """
    Load the signing secret from a key file.

    Args:
        path: Key file location

    Returns:
        Raw file contents used as the HMAC key

    Raises:
        FileNotFoundError: If the key file does not exist
        ValueError: If the key file is empty
    """
    key_file = Path(path)
    if not key_file.is_file():
        raise FileNotFoundError(
            f"Secret key file '{key_file}' not found. "
            "Create one with 'python -m recipeapp genkey' or set SECRET_KEY_FILE."
        )

    secret = key_file.read_bytes()
    if not secret.strip():
        raise ValueError(f"Secret key file '{key_file}' is empty")

    return secret


class JWTTokenService:
    """
    Issues and validates HMAC-signed JWT bearer tokens.

    Tokens carry the user's ``id`` and ``username`` plus the standard
    ``iss``/``aud``/``sub``/``iat``/``exp`` claims.
    """

    def __init__(self, secret: bytes, config: TokenConfig):
        """
        Initialize token service with injected secret and config.

        Args:
            secret: HMAC signing key, fixed for the process lifetime
            config: Token configuration object
        """
        self._secret = secret
        self.config = config
        self.algorithm = TOKEN_ALGORITHM
        self.issuer = config.issuer
        self.audience = config.audience
        self.subject = config.subject
        self.ttl_seconds = config.ttl_seconds

    def issue(self, user_id: int, username: str) -> str:
        """
        Issue a signed token for a user.

        Args:
            user_id: User identifier
            username: Username

        Returns:
            Compact JWT string valid for ``ttl_seconds``
        """
        now = int(time.time())
        claims = {
            "id": user_id,
            "username": username,
            "iss": self.issuer,
            "aud": self.audience,
            "sub": self.subject,
            "iat": now,
            "exp": now + self.ttl_seconds,
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Tuple[bool, Optional[TokenPayload]]:
        """
        Validate a token.

        Args:
            token: JWT token string (with or without Bearer prefix)

        Returns:
            Tuple of (is_valid, payload or None)
        """
        if token.startswith("Bearer "):
            token = token[7:]

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
                options={
                    "verify_signature": True,
                    "verify_aud": True,
                    "verify_iss": True,
                    "verify_exp": True,
                    "require": ["exp", "iat", "iss", "aud", "sub"]
                }
            )
        except jwt.ExpiredSignatureError:
            logger.debug("JWT token expired")
            return False, None
        except jwt.InvalidAudienceError:
            logger.debug(f"Invalid audience in JWT (expected {self.audience})")
            return False, None
        except jwt.InvalidIssuerError:
            logger.debug(f"Invalid issuer in JWT (expected {self.issuer})")
            return False, None
        except jwt.InvalidTokenError as e:
            logger.debug(f"Invalid JWT token: {e}")
            return False, None

        return self._check_claims(claims)

    def _check_claims(self, claims: Dict[str, Any]) -> Tuple[bool, Optional[TokenPayload]]:
        """Checks PyJWT does not cover: subject, maximum age and identity claims."""
        if claims.get("sub") != self.subject:
            logger.debug(f"Invalid subject in JWT (expected {self.subject})")
            return False, None

        issued_at = claims.get("iat")
        if not isinstance(issued_at, (int, float)) or time.time() - issued_at > self.ttl_seconds:
            logger.debug("JWT token older than maximum age")
            return False, None

        user_id = claims.get("id")
        username = claims.get("username")
        if isinstance(user_id, bool) or not isinstance(user_id, int) or not isinstance(username, str):
            logger.debug("JWT token missing identity claims")
            return False, None

        return True, TokenPayload(id=user_id, username=username)
