"""FastAPI lifespan helpers for the marketplace application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.routing import Lifespan
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from trendiwear_api.common.logging import log_context
from trendiwear_api.db import DatabaseConfig, db
from trendiwear_api.infra.storage import init_storage, shutdown_storage
from trendiwear_api.settings import Settings

logger = logging.getLogger(__name__)


def create_application_lifespan(*, settings: Settings) -> Lifespan[FastAPI]:
    """Return the FastAPI lifespan handler used by the app factory."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.settings = settings
        logger.info(
            "trendiwear_api.startup",
            extra=log_context(
                logging_level=settings.logging_level,
                version=settings.app_version,
            ),
        )

        safe_url = make_url(str(settings.database_url)).render_as_string(hide_password=True)
        logger.info("db.init.start", extra={"database_url": safe_url})
        db.init(DatabaseConfig.from_settings(settings))
        logger.info("db.init.complete", extra={"database_url": safe_url})
        init_storage(app, settings)

        try:
            # Fail fast if the schema hasn't been migrated.
            try:
                async with db.engine.connect() as conn:
                    await conn.execute(text("SELECT 1 FROM alembic_version"))
            except SQLAlchemyError as exc:
                logger.error(
                    "db.schema.missing",
                    extra={"database_url": safe_url},
                    exc_info=True,
                )
                raise RuntimeError(
                    "Database schema is not initialized. "
                    "Run `trendiwear migrate` before starting the API."
                ) from exc

            yield
        finally:
            shutdown_storage(app)
            await db.dispose()
            logger.info("trendiwear_api.shutdown")

    return lifespan


__all__ = ["create_application_lifespan"]
