"""Shared pytest fixtures for API tests."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from trendiwear_api.db.migrations import run_migrations
from trendiwear_api.main import create_app
from trendiwear_api.models import UserRole
from trendiwear_api.settings import Settings, reload_settings

from .utils import ApiUser, register_user

TEST_JWT_SECRET = "test-secret-with-enough-entropy-for-hs256-signing"
_ENV_VARS = (
    "TRENDIWEAR_DATABASE_URL",
    "TRENDIWEAR_STORAGE_DIR",
    "TRENDIWEAR_JWT_SECRET",
    "TRENDIWEAR_LOGGING_LEVEL",
    "TRENDIWEAR_API_DOCS_ENABLED",
)


def pytest_collection_modifyitems(config, items) -> None:
    for item in items:
        path_str = str(Path(str(item.fspath)))
        if f"{os.sep}integration{os.sep}" in path_str:
            item.add_marker(pytest.mark.integration)
        elif f"{os.sep}unit{os.sep}" in path_str:
            item.add_marker(pytest.mark.unit)


@pytest.fixture(scope="session")
def settings(tmp_path_factory: pytest.TempPathFactory) -> Settings:
    """Point the settings at a migrated SQLite file for the test session."""

    data_dir = tmp_path_factory.mktemp("trendiwear-data")
    os.environ["TRENDIWEAR_DATABASE_URL"] = f"sqlite+aiosqlite:///{data_dir / 'test.sqlite'}"
    os.environ["TRENDIWEAR_STORAGE_DIR"] = str(data_dir / "storage")
    os.environ["TRENDIWEAR_JWT_SECRET"] = TEST_JWT_SECRET
    os.environ["TRENDIWEAR_LOGGING_LEVEL"] = "WARNING"
    os.environ["TRENDIWEAR_API_DOCS_ENABLED"] = "false"
    resolved = reload_settings()
    run_migrations(resolved)

    yield resolved

    for env_var in _ENV_VARS:
        os.environ.pop(env_var, None)
    reload_settings()


@pytest.fixture(scope="session")
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest_asyncio.fixture()
async def async_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Provide an HTTPX async client bound to a started application."""

    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as client:
            yield client


@pytest.fixture()
def make_user(
    async_client: AsyncClient, settings: Settings
) -> Callable[..., Awaitable[ApiUser]]:
    """Return a factory provisioning a user with the requested role."""

    async def _make(role: UserRole = UserRole.CUSTOMER, **claims: str) -> ApiUser:
        return await register_user(
            async_client, secret=settings.jwt_secret_value, role=role, **claims
        )

    return _make


@pytest_asyncio.fixture()
async def customer(make_user) -> ApiUser:
    return await make_user(UserRole.CUSTOMER)


@pytest_asyncio.fixture()
async def professional(make_user) -> ApiUser:
    return await make_user(UserRole.PROFESSIONAL)


@pytest_asyncio.fixture()
async def admin(make_user) -> ApiUser:
    return await make_user(UserRole.ADMIN)


@pytest_asyncio.fixture()
async def super_admin(make_user) -> ApiUser:
    return await make_user(UserRole.SUPER_ADMIN)
