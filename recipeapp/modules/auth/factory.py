"""
Authentication Factory following Black Box Design principles.

This factory:
- Constructs the authentication stack based on configuration
- Wires dependencies together
- Returns only the public interfaces
"""

import logging
from typing import Optional

from .service import DefaultAuthenticationService, AuthenticationService
from .tokens import JWTTokenService, load_secret
from ...config.provider import ConfigProvider

logger = logging.getLogger(__name__)


class AuthFactory:
    """
    Factory for building the authentication stack.

    This is the composition root that:
    - Loads the signing secret
    - Creates the token service
    - Wraps it in the authentication facade
    """

    @staticmethod
    def build_token_service(
        config_provider: ConfigProvider,
        secret: Optional[bytes] = None
    ) -> JWTTokenService:
        """
        Build the token issuer/validator.

        Args:
            config_provider: Configuration provider
            secret: Signing key; read from the configured key file when omitted

        Returns:
            JWTTokenService

        Raises:
            FileNotFoundError: If no secret is given and the key file is absent
        """
        token_config = config_provider.get_token_config()
        if secret is None:
            secret = load_secret(token_config.secret_file)
            logger.info(f"Loaded token secret from {token_config.secret_file}")

        return JWTTokenService(secret, token_config)

    @staticmethod
    def build(token_service: JWTTokenService) -> AuthenticationService:
        """
        Build the authentication facade around a token service.

        Returns:
            AuthenticationService facade (hides all implementation details)
        """
        logger.info(f"Building authentication stack with {token_service.algorithm} bearer tokens")
        return DefaultAuthenticationService(token_service)
