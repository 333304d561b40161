from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from trendiwear_api import cli
from trendiwear_api.settings import Settings

runner = CliRunner()


def test_settings_command_masks_the_jwt_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    secret = "cli-secret-value-with-at-least-32-characters"
    resolved = Settings(_env_file=None, jwt_secret=secret, tax_rate=0.2)
    monkeypatch.setattr(cli, "get_settings", lambda: resolved)

    result = runner.invoke(cli.app, ["settings"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["jwt_secret"] == "********"
    assert payload["tax_rate"] == 0.2
    assert secret not in result.stdout


def test_migrate_command_upgrades_to_the_requested_revision(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    calls: list[str] = []
    monkeypatch.setattr(cli, "run_migrations", lambda *, revision: calls.append(revision))

    result = runner.invoke(cli.app, ["migrate", "0001"])

    assert result.exit_code == 0
    assert calls == ["0001"]
    assert "Database migrated to 0001." in result.stdout
