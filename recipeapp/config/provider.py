"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Optional, Protocol, List

from dotenv import load_dotenv


@dataclass
class APIConfig:
    """API configuration."""
    port: int
    host: str
    debug: bool
    cors_origins: List[str]
    log_level: str


@dataclass
class StoreConfig:
    """Document store configuration."""
    path: str


@dataclass
class TokenConfig:
    """Bearer token configuration."""
    secret_file: str
    issuer: str
    audience: str
    subject: str
    ttl_seconds: int


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_api_config(self) -> APIConfig:
        """Get API configuration."""
        ...

    def get_store_config(self) -> StoreConfig:
        """Get document store configuration."""
        ...

    def get_token_config(self) -> TokenConfig:
        """Get token configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def __init__(self, env_file: Optional[str] = None):
        """
        Initialize provider.

        Args:
            env_file: Optional .env file to load before reading the environment.
                Variables already set in the environment take precedence.
        """
        load_dotenv(env_file)

    def get_api_config(self) -> APIConfig:
        """Get API configuration from environment variables."""
        return APIConfig(
            port=int(os.getenv("API_PORT", "3000")),
            host=os.getenv("API_HOST", "0.0.0.0"),
            debug=os.getenv("API_DEBUG", "false").lower() == "true",
            cors_origins=os.getenv("CORS_ORIGINS", "*").split(","),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def get_store_config(self) -> StoreConfig:
        """Get document store configuration from environment variables."""
        return StoreConfig(path=os.getenv("DB_PATH", "db.json"))

    def get_token_config(self) -> TokenConfig:
        """Get token configuration from environment variables."""
        port = os.getenv("API_PORT", "3000")
        return TokenConfig(
            secret_file=os.getenv("SECRET_KEY_FILE", "secret_key"),
            issuer=os.getenv("TOKEN_ISSUER", "recipe-app"),
            audience=os.getenv("TOKEN_AUDIENCE") or f"http://localhost:{port}",
            subject=os.getenv("TOKEN_SUBJECT", "recipe-app"),
            ttl_seconds=int(os.getenv("TOKEN_TTL_SECONDS", "3600")),
        )
