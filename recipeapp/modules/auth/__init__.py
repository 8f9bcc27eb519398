"""
Authentication Module - Black Box Interface

Purpose: Hash passwords, issue and validate bearer tokens
Interface: Pbkdf2Hasher.hash(), JWTTokenService.issue(), JWTTokenService.verify()
Hidden: Key derivation parameters, token format, signing key

This module can be completely replaced with any other auth implementation
(OAuth, external identity provider) without affecting other modules.
"""

from .factory import AuthFactory
from .interfaces import PasswordHasher, TokenIssuer, TokenPayload, TokenValidator
from .passwords import Pbkdf2Hasher
from .service import AuthenticationService, AuthResult, DefaultAuthenticationService
from .tokens import JWTTokenService, load_secret

__all__ = [
    "AuthFactory",
    "AuthResult",
    "AuthenticationService",
    "DefaultAuthenticationService",
    "JWTTokenService",
    "PasswordHasher",
    "Pbkdf2Hasher",
    "TokenIssuer",
    "TokenPayload",
    "TokenValidator",
    "load_secret",
]
