"""
Unit tests for the environment configuration provider.
"""

import os
from unittest.mock import patch

import jwt

from recipeapp.config.provider import EnvConfigProvider
from recipeapp.modules.auth import JWTTokenService


def test_defaults(tmp_path):
    """Unset variables fall back to the documented defaults."""
    with patch.dict(os.environ, {}, clear=True):
        provider = EnvConfigProvider(str(tmp_path / "absent.env"))
        api = provider.get_api_config()
        store = provider.get_store_config()
        token = provider.get_token_config()

    assert api.port == 3000
    assert api.host == "0.0.0.0"
    assert api.debug is False
    assert api.cors_origins == ["*"]
    assert api.log_level == "INFO"
    assert store.path == "db.json"
    assert token.secret_file == "secret_key"
    assert not hasattr(token, "algorithm")
    assert token.issuer == "recipe-app"
    assert token.subject == "recipe-app"
    assert token.audience == "http://localhost:3000"
    assert token.ttl_seconds == 3600


def test_environment_overrides(tmp_path):
    env = {
        "API_PORT": "8081",
        "API_DEBUG": "true",
        "CORS_ORIGINS": "http://a.test,http://b.test",
        "LOG_LEVEL": "debug",
        "DB_PATH": "/data/db.json",
        "SECRET_KEY_FILE": "/run/secrets/key",
        "TOKEN_TTL_SECONDS": "60",
    }
    with patch.dict(os.environ, env, clear=True):
        provider = EnvConfigProvider(str(tmp_path / "absent.env"))
        api = provider.get_api_config()
        store = provider.get_store_config()
        token = provider.get_token_config()

    assert api.port == 8081
    assert api.debug is True
    assert api.cors_origins == ["http://a.test", "http://b.test"]
    assert api.log_level == "DEBUG"
    assert store.path == "/data/db.json"
    assert token.secret_file == "/run/secrets/key"
    assert token.audience == "http://localhost:8081"
    assert token.ttl_seconds == 60


def test_explicit_audience_wins(tmp_path):
    with patch.dict(os.environ, {"TOKEN_AUDIENCE": "https://recipes.example.com"}, clear=True):
        token = EnvConfigProvider(str(tmp_path / "absent.env")).get_token_config()

    assert token.audience == "https://recipes.example.com"


def test_env_file_is_loaded(tmp_path):
    """Values from a .env file are used when not set in the environment."""
    env_file = tmp_path / ".env"
    env_file.write_text("DB_PATH=from-dotenv.json\n")

    with patch.dict(os.environ, {}, clear=True):
        store = EnvConfigProvider(str(env_file)).get_store_config()

    assert store.path == "from-dotenv.json"


def test_signing_algorithm_is_not_configurable(tmp_path):
    """TOKEN_ALGORITHM in the environment has no effect on issued tokens."""
    with patch.dict(os.environ, {"TOKEN_ALGORITHM": "none"}, clear=True):
        token_config = EnvConfigProvider(str(tmp_path / "absent.env")).get_token_config()

    token = JWTTokenService(b"k" * 64, token_config).issue(1, "alice")

    assert jwt.get_unverified_header(token)["alg"] == "HS256"
