"""Programmatic Alembic runner.

Migrations ship inside the package, so the Alembic config is built in code
rather than read from an ``alembic.ini``.
"""

from __future__ import annotations

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from trendiwear_api.settings import Settings, get_settings

from .database import build_sync_url

__all__ = [
    "MIGRATIONS_DIR",
    "build_alembic_config",
    "run_migrations",
]

MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "migrations"


def build_alembic_config(database_url: str) -> Config:
    """Return an Alembic config targeting ``database_url``."""

    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("sqlalchemy.url", build_sync_url(database_url).replace("%", "%%"))
    # Logging is configured by the application, not by Alembic.
    config.attributes["configure_logger"] = False
    return config


def run_migrations(settings: Settings | None = None, *, revision: str = "head") -> None:
    resolved = settings or get_settings()
    _ensure_sqlite_parent_dir(resolved.database_url)
    command.upgrade(build_alembic_config(resolved.database_url), revision)


def _ensure_sqlite_parent_dir(url: str) -> None:
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return
    database = (parsed.database or "").strip()
    if not database or database == ":memory:" or database.startswith("file:"):
        return
    path = Path(database)
    if not path.is_absolute():
        path = (Path.cwd() / path).resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
