"""Storage adapter factory + FastAPI lifecycle helpers."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from trendiwear_api.settings import Settings

from .base import StorageAdapter
from .filesystem import FilesystemStorage


def build_storage_adapter(settings: Settings) -> FilesystemStorage:
    return FilesystemStorage(
        settings.storage_dir,
        public_base_url=settings.storage_public_url,
    )


def _resolve_app(app_or_request: FastAPI | Request) -> FastAPI:
    if isinstance(app_or_request, FastAPI):
        return app_or_request
    return app_or_request.app


def init_storage(app: FastAPI, settings: Settings) -> None:
    app.state.storage = build_storage_adapter(settings)


def shutdown_storage(app: FastAPI) -> None:
    app.state.storage = None


def mount_public_storage(app: FastAPI, settings: Settings) -> None:
    """Serve stored objects read-only under ``settings.storage_public_path``."""

    settings.storage_dir.mkdir(parents=True, exist_ok=True)
    app.mount(
        settings.storage_public_path,
        StaticFiles(directory=settings.storage_dir, check_dir=False),
        name="media",
    )


def get_storage_adapter(app_or_request: FastAPI | Request) -> StorageAdapter:
    app = _resolve_app(app_or_request)
    adapter = getattr(app.state, "storage", None)
    if adapter is None:
        raise RuntimeError("Storage not initialized. Call init_storage(app, ...) at startup.")
    return adapter


__all__ = [
    "build_storage_adapter",
    "get_storage_adapter",
    "init_storage",
    "mount_public_storage",
    "shutdown_storage",
]
