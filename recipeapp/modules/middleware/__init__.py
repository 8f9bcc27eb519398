"""
Authentication Middleware Module - Black Box Interface

Purpose: Provide reusable bearer-token middleware for FastAPI applications
Interface: Middleware factory functions that return configured middleware
Hidden: Authentication logic, header extraction

Can be used by any FastAPI app or sub-app that needs authentication.
Completely independent and replaceable.
"""

import logging
from typing import Awaitable, Callable, Dict, Optional

from fastapi import Request, Response

from ..auth.service import AuthenticationService, AuthResult

logger = logging.getLogger(__name__)


class AuthMiddleware:
    """
    Configurable authentication middleware for FastAPI applications.

    Every request not listed in ``skip_paths`` must carry a valid
    ``Authorization: Bearer <token>`` header; otherwise it is answered with
    an empty 401. The verified identity is stored on ``request.state.auth``.
    """

    def __init__(
        self,
        authenticator: Callable[[Optional[str]], Awaitable[AuthResult]],
        skip_paths: Optional[Dict[str, list]] = None,
        log_attempts: bool = True
    ):
        """
        Initialize authentication middleware.

        Args:
            authenticator: Async function taking the Authorization header, returns AuthResult
            skip_paths: Dict of {path: [methods]} to skip authentication
            log_attempts: Whether to log authentication attempts
        """
        self.authenticator = authenticator
        self.skip_paths = skip_paths or {}
        self.log_attempts = log_attempts

    def should_skip_auth(self, request: Request) -> bool:
        """Check if authentication should be skipped for this request."""
        path = str(request.url.path)
        method = request.method.upper()

        if path in self.skip_paths:
            allowed_methods = self.skip_paths[path]
            if "*" in allowed_methods or method in allowed_methods:
                return True

        return False

    async def __call__(self, request: Request, call_next):
        """Process the request through authentication middleware."""
        if self.should_skip_auth(request):
            if self.log_attempts:
                logger.debug(f"Skipping auth for {request.method} {request.url.path}")
            return await call_next(request)

        result = await self.authenticator(request.headers.get("authorization"))

        if not result.ok:
            if self.log_attempts:
                logger.warning(
                    f"Rejected {request.method} {request.url.path}: {result.error}"
                )
            return Response(status_code=401)

        if self.log_attempts:
            logger.debug(f"Request authenticated for user: {result.identity.username}")

        request.state.auth = result.identity

        return await call_next(request)


def create_bearer_token_middleware(
    auth_service: AuthenticationService,
    skip_paths: Optional[Dict[str, list]] = None,
    log_attempts: bool = True
) -> AuthMiddleware:
    """
    Factory function to create Bearer token authentication middleware.

    Args:
        auth_service: AuthenticationService facade
        skip_paths: Paths to skip authentication {"/path": ["GET", "POST"]}
        log_attempts: Whether to log authentication attempts

    Returns:
        Configured AuthMiddleware instance
    """
    return AuthMiddleware(
        authenticator=auth_service.authenticate,
        skip_paths=skip_paths,
        log_attempts=log_attempts
    )


__all__ = [
    "AuthMiddleware",
    "create_bearer_token_middleware"
]
