from __future__ import annotations

from pathlib import Path

from alembic import command
from sqlalchemy import create_engine, inspect, text

import trendiwear_api.models  # noqa: F401
from trendiwear_api.db import Base
from trendiwear_api.db.migrations import build_alembic_config

HEAD = "0002_styling_and_notifications"


def _sqlite(path: Path) -> tuple[str, str]:
    return f"sqlite+aiosqlite:///{path}", f"sqlite:///{path}"


def test_upgrade_creates_every_mapped_table(tmp_path: Path) -> None:
    async_url, sync_url = _sqlite(tmp_path / "schema.sqlite")

    command.upgrade(build_alembic_config(async_url), "head")

    engine = create_engine(sync_url)
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names()) - {"alembic_version"}
        assert tables == set(Base.metadata.tables)

        for table in Base.metadata.sorted_tables:
            migrated = {column["name"] for column in inspector.get_columns(table.name)}
            assert migrated == set(table.columns.keys()), table.name

        indexes = {index["name"]: index for index in inspector.get_indexes("addresses")}
        assert indexes["addresses_user_default_key"]["unique"]

        with engine.connect() as conn:
            version = conn.execute(text("SELECT version_num FROM alembic_version")).scalar_one()
        assert version == HEAD
    finally:
        engine.dispose()


def test_downgrade_steps_back_one_revision_at_a_time(tmp_path: Path) -> None:
    async_url, sync_url = _sqlite(tmp_path / "steps.sqlite")
    config = build_alembic_config(async_url)

    command.upgrade(config, "head")
    command.downgrade(config, "0001_initial_schema")

    engine = create_engine(sync_url)
    try:
        tables = set(inspect(engine).get_table_names())
        assert "orders" in tables
        assert "events" not in tables
        assert "notifications" not in tables
    finally:
        engine.dispose()

    command.downgrade(config, "base")
    engine = create_engine(sync_url)
    try:
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()
