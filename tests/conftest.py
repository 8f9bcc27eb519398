"""
Shared pytest fixtures for Recipe App tests.

This module provides common fixtures including:
- Static configuration provider with a temporary key file
- In-memory document store
- Token service, user and ingredient modules
- FastAPI test client wired to the in-memory store
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from recipeapp.config.provider import APIConfig, StoreConfig, TokenConfig
from recipeapp.main import create_app
from recipeapp.modules.auth import JWTTokenService, Pbkdf2Hasher
from recipeapp.modules.ingredients import IngredientModule
from recipeapp.modules.storage import InMemoryStore
from recipeapp.modules.users import UserModule

TEST_SECRET = b"3f9a" * 32
OTHER_SECRET = b"c0de" * 32


class StaticConfigProvider:
    """ConfigProvider returning fixed values for tests."""

    def __init__(self, secret_file: str, db_path: str = "db.json", ttl_seconds: int = 3600):
        self.secret_file = secret_file
        self.db_path = db_path
        self.ttl_seconds = ttl_seconds

    def get_api_config(self) -> APIConfig:
        return APIConfig(port=3000, host="127.0.0.1", debug=False, cors_origins=["*"], log_level="DEBUG")

    def get_store_config(self) -> StoreConfig:
        return StoreConfig(path=self.db_path)

    def get_token_config(self) -> TokenConfig:
        return TokenConfig(
            secret_file=self.secret_file,
            issuer="recipe-app",
            audience="http://localhost:3000",
            subject="recipe-app",
            ttl_seconds=self.ttl_seconds,
        )


@pytest.fixture
def secret_file(tmp_path):
    """Key file holding the test secret."""
    path = tmp_path / "secret_key"
    path.write_bytes(TEST_SECRET)
    return path


@pytest.fixture
def config_provider(secret_file, tmp_path):
    """Static configuration pointing at temporary files."""
    return StaticConfigProvider(str(secret_file), db_path=str(tmp_path / "db.json"))


@pytest.fixture
def token_config(config_provider) -> TokenConfig:
    return config_provider.get_token_config()


@pytest.fixture
def token_service(token_config) -> JWTTokenService:
    """Token service signing with the test secret."""
    return JWTTokenService(TEST_SECRET, token_config)


@pytest.fixture
def memory_store() -> InMemoryStore:
    """Empty in-memory document store."""
    return InMemoryStore()


@pytest.fixture
def hasher() -> Pbkdf2Hasher:
    return Pbkdf2Hasher()


@pytest.fixture
def user_module(memory_store, hasher) -> UserModule:
    return UserModule(memory_store, hasher)


@pytest.fixture
def ingredient_module(memory_store) -> IngredientModule:
    return IngredientModule(memory_store)


@pytest.fixture
def app(config_provider, memory_store, token_service):
    """Application wired to the in-memory store."""
    return create_app(config_provider, store=memory_store, token_service=token_service)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def bearer(token: str) -> dict:
    """Authorization header for a token."""
    return {"Authorization": f"Bearer {token}"}


def signup(client: TestClient, username: str = "alice", password: str = "pw1") -> str:
    """Sign up a user through the API and return the issued token."""
    response = client.post("/auth/signup", json={"username": username, "password": password})
    assert response.status_code == 200
    return response.json()["token"]
