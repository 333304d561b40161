"""trendiwear: CLI for the marketplace API."""

from __future__ import annotations

import json

import typer
import uvicorn

from trendiwear_api.db.migrations import run_migrations
from trendiwear_api.settings import get_settings

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Trendiwear API CLI (migrate, start, settings).",
)

_SECRET_FIELDS = {"jwt_secret"}


@app.callback()
def _main(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command(name="migrate", help="Apply Alembic migrations (upgrade head).")
def migrate(
    revision: str = typer.Argument("head", help="Alembic revision to upgrade to."),
) -> None:
    run_migrations(revision=revision)
    typer.echo(f"Database migrated to {revision}.")


@app.command(name="start", help="Serve the API with uvicorn.")
def start(
    host: str | None = typer.Option(None, "--host", help="Bind address."),
    port: int | None = typer.Option(None, "--port", help="Bind port."),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes."),
) -> None:
    settings = get_settings()
    uvicorn.run(
        "trendiwear_api.main:create_app",
        factory=True,
        host=host or settings.server_host,
        port=port or settings.server_port,
        reload=reload,
        log_config=None,
    )


@app.command(name="settings", help="Print effective settings with secrets masked.")
def show_settings() -> None:
    payload = get_settings().model_dump(mode="json")
    for field in _SECRET_FIELDS:
        if payload.get(field):
            payload[field] = "********"
    typer.echo(json.dumps(payload, indent=2, sort_keys=True))


if __name__ == "__main__":
    app()
