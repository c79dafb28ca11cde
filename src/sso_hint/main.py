"""
SSO Hint Service - Main Application

Offers a "continue with your last provider" shortcut on the login page:
- Reads the identity provider hint cookie set after an SSO login
- Resolves it against the identity provider registry (memory, Redis, admin API)
- Composes the broker login URL for the rendered login page
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI

from .config import Settings, get_settings
from .core.health_checker import HealthChecker
from .core.identity_provider import IIdentityProviderRegistry
from .core.sso_hint_controller import SSOHintController
from .infrastructure import (
    AdminApiIdentityProviderRegistry,
    InMemoryIdentityProviderRegistry,
    JWTAccessCodeGenerator,
    OIDCClientDataEncoder,
    RedisClient,
    RedisIdentityProviderRegistry,
)
from .api.routes import SERVICE_VERSION, router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan manager for startup/shutdown events"""
    settings = app.state.settings
    logger.info(f"Starting sso-hint-service v{SERVICE_VERSION}")
    logger.info(f"Identity provider registry: {settings.idp_registry_backend}")
    logger.info(f"Hint cookie: {settings.sso_cookie_name}")

    yield

    logger.info("Shutting down sso-hint-service")


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[IIdentityProviderRegistry] = None,
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        settings: Service settings (defaults to environment settings)
        registry: Identity provider registry overriding the configured backend

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())

    if registry is None:
        registry = _create_registry(settings)

    controller = SSOHintController(
        registry=registry,
        client_data_encoder=OIDCClientDataEncoder(),
        access_code_generator=JWTAccessCodeGenerator(
            secret=settings.access_code_secret,
            ttl=settings.access_code_ttl,
        ),
    )

    app = FastAPI(
        title="SSO Hint Service",
        description="Last-used identity provider shortcut for login pages",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.controller = controller
    app.state.health_checker = HealthChecker(registry)

    app.include_router(router)

    return app


def _create_registry(settings: Settings) -> IIdentityProviderRegistry:
    """
    Create the identity provider registry based on configuration.

    Raises:
        ValueError: If the backend is not supported or misconfigured
    """
    if settings.idp_registry_backend == "memory":
        logger.info("Using in-memory identity provider registry")
        return InMemoryIdentityProviderRegistry.from_seed(settings.idp_registry_seed)
    elif settings.idp_registry_backend == "redis":
        logger.info("Using Redis identity provider registry")
        return RedisIdentityProviderRegistry(RedisClient(settings))
    elif settings.idp_registry_backend == "admin-api":
        if not settings.admin_api_url:
            raise ValueError("admin_api_url is required for the admin-api registry backend")
        logger.info("Using admin API identity provider registry")
        return AdminApiIdentityProviderRegistry(
            api_url=settings.admin_api_url,
            token=settings.admin_api_token,
            cache_ttl=settings.idp_cache_ttl,
            cache_size=settings.idp_cache_size,
        )
    else:
        raise ValueError(
            f"Unsupported identity provider registry backend: {settings.idp_registry_backend}"
        )


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "sso_hint.main:create_app",
        factory=True,
        host=settings.service_host,
        port=settings.service_port,
        log_level=settings.log_level.lower(),
    )
