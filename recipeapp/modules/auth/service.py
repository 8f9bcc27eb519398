"""
Authentication Service Facade following Black Box Design principles.

This module provides:
- A clean interface for authentication that hides implementation details
- Standardized authentication results
- Protocol definitions for swappable implementations
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from .interfaces import TokenPayload, TokenValidator

logger = logging.getLogger(__name__)


@dataclass
class AuthResult:
    """Standardized authentication result."""
    ok: bool
    identity: Optional[TokenPayload]
    error: Optional[str] = None


class AuthenticationService(Protocol):
    """Protocol for authentication services."""

    async def authenticate(self, authorization: Optional[str]) -> AuthResult:
        """
        Authenticate a request.

        Args:
            authorization: Authorization header value

        Returns:
            AuthResult with authentication status and details
        """
        ...


class DefaultAuthenticationService:
    """
    Default implementation of AuthenticationService.

    This facade hides the token format and provides a clean, stable
    interface for the API layer.
    """

    def __init__(self, token_validator: TokenValidator):
        """
        Initialize with any validator that has verify().

        Args:
            token_validator: Module with verify(token) -> (ok, payload)
        """
        self._validator = token_validator

    async def authenticate(self, authorization: Optional[str]) -> AuthResult:
        """
        Authenticate a request from its Authorization header.

        Args:
            authorization: Authorization header value ("Bearer <token>")

        Returns:
            AuthResult with authentication status and details
        """
        if not authorization:
            return AuthResult(ok=False, identity=None, error="Authorization header missing")

        scheme, _, token = authorization.partition(" ")
        token = token.strip()
        if scheme.lower() != "bearer" or not token:
            return AuthResult(ok=False, identity=None, error="Bearer token missing")

        ok, payload = self._validator.verify(token)
        if not ok:
            return AuthResult(ok=False, identity=None, error="Invalid credentials")

        return AuthResult(ok=True, identity=payload)
