"""Marketplace FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from .api.v1.router import create_api_router
from .app.lifecycles import create_application_lifespan
from .common.exceptions import register_exception_handlers
from .common.logging import setup_logging
from .common.middleware import register_middleware
from .core.http import register_auth_exception_handlers
from .infra.storage import mount_public_storage
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)
API_PREFIX = "/api"


def create_app(settings: Settings | None = None) -> FastAPI:
    """Return a configured FastAPI application."""

    # Settings + logging first so everything else uses the configured root logger.
    settings = settings or get_settings()
    setup_logging(settings)

    docs_url = settings.docs_url if settings.api_docs_enabled else None
    redoc_url = settings.redoc_url if settings.api_docs_enabled else None
    openapi_url = settings.openapi_url if settings.api_docs_enabled else None

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
        debug=settings.debug,
        lifespan=create_application_lifespan(settings=settings),
    )
    app.state.settings = settings

    register_exception_handlers(app)
    register_auth_exception_handlers(app)
    register_middleware(app, settings=settings)
    app.include_router(create_api_router(), prefix=API_PREFIX)
    mount_public_storage(app, settings)
    if settings.api_docs_enabled:
        logger.info(
            "api.docs.enabled",
            extra={"swagger_url": docs_url, "redoc_url": redoc_url, "openapi_url": openapi_url},
        )
    return app


__all__ = ["API_PREFIX", "create_app"]
