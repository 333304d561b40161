from __future__ import annotations

import pytest
from pydantic import ValidationError

from trendiwear_api.settings import Settings


def test_upload_types_accept_comma_separated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRENDIWEAR_UPLOAD_ALLOWED_TYPES", "image/PNG, image/jpeg,image/png")

    settings = Settings(_env_file=None)

    assert settings.upload_allowed_types == ["image/png", "image/jpeg"]


def test_upload_types_dedupe_json_array_case_insensitively() -> None:
    settings = Settings(
        _env_file=None,
        upload_allowed_types='["IMAGE/WEBP", "image/webp", "image/Gif"]',
    )

    assert settings.upload_allowed_types == ["image/webp", "image/gif"]


def test_short_jwt_secret_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, jwt_secret="too-short")


def test_storage_public_url_derives_from_server_url() -> None:
    settings = Settings(
        _env_file=None,
        server_public_url="https://shop.example.test/",
        storage_public_path="assets/",
        storage_public_url=None,
    )

    assert settings.storage_public_path == "/assets"
    assert settings.storage_public_url == "https://shop.example.test/assets"


def test_commerce_defaults() -> None:
    settings = Settings(_env_file=None, tax_rate=0.16, escrow_release_days=2)

    assert settings.tax_rate == 0.16
    assert settings.escrow_release_days == 2
    assert settings.jwt_secret_value
