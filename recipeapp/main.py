#!/usr/bin/env python3
"""
Recipe App - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Initializes modules (store, auth, users, ingredients, recipes)
3. Exposes them through the REST API

All business logic is in the modules, following black box principles.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import Body, Depends, FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from recipeapp.config.provider import ConfigProvider, EnvConfigProvider
from recipeapp.modules.api import (
    AuthRequest,
    AuthResponse,
    GenericResponse,
    IngredientModel,
    IngredientRequest,
    Recipe,
    UserResponse,
)
from recipeapp.modules.auth import AuthFactory, JWTTokenService, Pbkdf2Hasher, TokenPayload
from recipeapp.modules.ingredients import IngredientModule, IngredientService
from recipeapp.modules.middleware import create_bearer_token_middleware
from recipeapp.modules.recipes import RecipeModule, RecipeService
from recipeapp.modules.storage import DocumentStore, JsonFileStore
from recipeapp.modules.users import User, UserModule, UserService

logger = logging.getLogger(__name__)

# Routes reachable without a bearer token
PUBLIC_PATHS = {
    "/auth/login": ["POST"],
    "/auth/signup": ["POST"],
    "/health": ["GET"],
    "/docs": ["GET"],
    "/redoc": ["GET"],
    "/openapi.json": ["GET"],
}


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the uniform error body."""
    return JSONResponse(
        status_code=status_code,
        content=GenericResponse(status="ERROR", error=message).model_dump(),
    )


def to_auth_response(token_service: JWTTokenService, user: User) -> AuthResponse:
    return AuthResponse(token=token_service.issue(user.id, user.username))


def parse_id(value: str) -> Optional[int]:
    """Numeric path id, or None unless the value is plain ASCII digits."""
    if value.isascii() and value.isdigit():
        return int(value)
    return None


# Dependency injection helpers


def get_user_module(request: Request) -> UserService:
    return request.app.state.user_module


def get_ingredient_module(request: Request) -> IngredientService:
    return request.app.state.ingredient_module


def get_recipe_module(request: Request) -> RecipeService:
    return request.app.state.recipe_module


def get_token_service(request: Request) -> JWTTokenService:
    return request.app.state.token_service


def get_current_identity(request: Request) -> TokenPayload:
    """Identity verified by the auth middleware."""
    identity = getattr(request.state, "auth", None)
    if identity is None:
        raise HTTPException(401)
    return identity


def create_app(
    config_provider: Optional[ConfigProvider] = None,
    store: Optional[DocumentStore] = None,
    token_service: Optional[JWTTokenService] = None,
) -> FastAPI:
    """
    Build the FastAPI application with all modules wired in.

    Args:
        config_provider: Configuration source (environment by default)
        store: Document store; a JsonFileStore at the configured path by default
        token_service: Token service; built from the configured key file by default

    Returns:
        Configured FastAPI application

    Raises:
        FileNotFoundError: If the secret key file is missing
    """
    config_provider = config_provider or EnvConfigProvider()
    api_config = config_provider.get_api_config()

    if store is None:
        store = JsonFileStore(config_provider.get_store_config().path)
    if token_service is None:
        token_service = AuthFactory.build_token_service(config_provider)
    auth_service = AuthFactory.build(token_service)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Recipe App API started")
        yield
        logger.info("Recipe App API shutdown complete")

    app = FastAPI(
        title="Recipe App API",
        description="Users, recipes and ingredients backed by a JSON document store",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.state.store = store
    app.state.token_service = token_service
    app.state.user_module = UserModule(store, Pbkdf2Hasher())
    app.state.ingredient_module = IngredientModule(store)
    app.state.recipe_module = RecipeModule(store)

    auth_middleware = create_bearer_token_middleware(auth_service, skip_paths=PUBLIC_PATHS)

    @app.middleware("http")
    async def require_bearer_token(request: Request, call_next):
        return await auth_middleware(request, call_next)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    register_error_handlers(app)

    return app


def register_routes(app: FastAPI) -> None:
    """Attach all API endpoints."""

    # Unauthenticated routes

    @app.post("/auth/login", response_model=AuthResponse)
    async def login(
        request: AuthRequest,
        users: UserService = Depends(get_user_module),
        token_service: JWTTokenService = Depends(get_token_service),
    ):
        """
        Exchange username and password for a bearer token.

        Returns:
            200: Token issued
            400: Missing username or password
            403: Invalid credentials
        """
        if not request.username or not request.password:
            return error_response(400, "'username' and 'password' required")

        if not users.authorize(request.username, request.password):
            return error_response(403, "invalid 'username' or 'password'")

        user = users.get_user_by_username(request.username)
        if not user:
            logger.error(f"User '{request.username}' authorized but not found")
            return error_response(500, "Unexpected internal error")

        return to_auth_response(token_service, user)

    @app.post("/auth/signup", response_model=AuthResponse)
    async def signup(
        request: AuthRequest,
        users: UserService = Depends(get_user_module),
        token_service: JWTTokenService = Depends(get_token_service),
    ):
        """
        Register a user and return a bearer token.

        Returns:
            200: User created
            400: Missing username or password
            409: Username already exists
        """
        if not request.username or not request.password:
            return error_response(400, "'username' and 'password' required")

        result = users.add(request.username, request.password)
        if not result.ok:
            return error_response(409, "'username' already exists")

        return to_auth_response(token_service, result.user)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    # Authenticated routes

    @app.put("/recipes", response_model=GenericResponse, response_model_exclude_none=True)
    async def replace_recipes(
        recipes: List[Recipe],
        recipe_module: RecipeService = Depends(get_recipe_module),
        identity: TokenPayload = Depends(get_current_identity),
    ):
        """Replace the whole recipe collection."""
        recipe_module.replace_all(
            [recipe.model_dump(mode="json", by_alias=True, exclude_unset=True) for recipe in recipes]
        )
        logger.info(f"User {identity.username} stored {len(recipes)} recipes")
        return GenericResponse(status="OK")

    @app.get("/recipes")
    async def list_recipes(recipe_module: RecipeService = Depends(get_recipe_module)):
        return recipe_module.list()

    @app.get("/recipes/{recipe_id}")
    async def get_recipe(recipe_id: str, recipe_module: RecipeService = Depends(get_recipe_module)):
        recipe = recipe_module.get(recipe_id)
        if recipe is None:
            return error_response(404, "NOT FOUND")
        return recipe

    @app.post("/ingredients", response_model=List[IngredientModel])
    async def get_or_add_ingredients(
        request: Optional[IngredientRequest] = Body(None),
        ingredients: IngredientService = Depends(get_ingredient_module),
    ):
        """
        Resolve ingredient names to ingredients, creating missing ones.

        Returns:
            200: Ingredients in request order
            400: Body without an 'ingredientNames' array
        """
        if request is None or request.ingredient_names is None:
            return error_response(
                400, "request body with 'ingredientNames' string array field required"
            )

        return [
            IngredientModel(id=ingredient.id, name=ingredient.name)
            for ingredient in map(ingredients.get_or_add, request.ingredient_names)
        ]

    @app.get("/ingredients", response_model=List[IngredientModel])
    async def list_ingredients(ingredients: IngredientService = Depends(get_ingredient_module)):
        return [IngredientModel(id=item.id, name=item.name) for item in ingredients.list()]

    @app.get("/ingredients/{ingredient_id}", response_model=IngredientModel)
    async def get_ingredient(
        ingredient_id: str,
        ingredients: IngredientService = Depends(get_ingredient_module),
    ):
        numeric_id = parse_id(ingredient_id)
        ingredient = ingredients.get(numeric_id) if numeric_id is not None else None
        if ingredient is None:
            return error_response(404, "NOT FOUND")
        return IngredientModel(id=ingredient.id, name=ingredient.name)

    @app.get("/users")
    async def list_users():
        """Listing users is not exposed."""
        return error_response(404, "NOT FOUND")

    @app.get("/users/me", response_model=UserResponse)
    async def read_users_me(
        identity: TokenPayload = Depends(get_current_identity),
        users: UserService = Depends(get_user_module),
    ):
        user = users.get_user_by_id(identity.id)
        if not user:
            return error_response(404, "NOT FOUND")
        return UserResponse(**user.public())

    @app.get("/users/{user_id}", response_model=UserResponse)
    async def read_user(
        user_id: str,
        identity: TokenPayload = Depends(get_current_identity),
        users: UserService = Depends(get_user_module),
    ):
        """
        Get a user by id; only the caller's own record is accessible.

        Returns:
            200: User found
            403: Requested id is not the caller's
            404: User not found
        """
        requested_id = parse_id(user_id)
        if requested_id != identity.id:
            return error_response(403, "FORBIDDEN")

        user = users.get_user_by_id(requested_id)
        if not user:
            return error_response(404, "NOT FOUND")
        return UserResponse(**user.public())


def register_error_handlers(app: FastAPI) -> None:
    """Map framework errors onto the uniform error body."""

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request body for {request.method} {request.url.path}")
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        )
        return error_response(400, f"invalid request: {details}")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 401:
            return Response(status_code=401)
        return error_response(exc.status_code, str(exc.detail))
