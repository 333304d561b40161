"""Trendiwear settings (conventional Pydantic v2)."""

from __future__ import annotations

import json
import secrets
from functools import lru_cache
from pathlib import Path
from typing import Any, ClassVar
from urllib.parse import urlparse

from pydantic import Field, SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import DotEnvSettingsSource, EnvSettingsSource

# ---- Defaults ---------------------------------------------------------------

MODULE_DIR = Path(__file__).resolve().parent

DEFAULT_DATA_DIR = Path("./data")
DEFAULT_PUBLIC_URL = "http://localhost:8000"
DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]
DEFAULT_DB_FILENAME = "trendiwear.sqlite"
DEFAULT_SQLITE_PATH = DEFAULT_DATA_DIR / "db" / DEFAULT_DB_FILENAME
DEFAULT_STORAGE_DIR = DEFAULT_DATA_DIR / "storage"
DEFAULT_UPLOAD_TYPES = ["image/jpeg", "image/png", "image/webp", "image/gif"]

DEFAULT_PAGE_LIMIT = 12
MAX_PAGE_LIMIT = 100

_LENIENT_LIST_FIELDS = {"server_cors_origins", "upload_allowed_types"}


# ---- Helpers ----------------------------------------------------------------

def _list_from_env(value: Any, *, default: list[str], lower: bool = False) -> list[str]:
    """JSON array or comma string; strip empties; dedupe preserving order."""
    if value in (None, "", []):
        items = list(default)
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            items = list(default)
        elif s.startswith("["):
            try:
                parsed = json.loads(s)
            except json.JSONDecodeError as exc:
                raise ValueError("Expected a JSON array") from exc
            if not isinstance(parsed, list):
                raise ValueError("Expected a JSON array")
            items = [str(x).strip() for x in parsed if str(x).strip()]
        else:
            items = [seg.strip() for seg in s.split(",") if seg.strip()]
    elif isinstance(value, (list, tuple, set)):
        items = [str(x).strip() for x in value if str(x).strip()]
    else:
        raise TypeError("Expected string or list")

    if lower:
        items = [x.lower() for x in items]

    seen, out = set(), []
    for x in items:
        if x not in seen:
            seen.add(x)
            out.append(x)
    return out


def _resolve_path(value: Path | str | None, *, default: Path) -> Path:
    """Expand, absolutize, and resolve a configurable path."""

    if value in (None, ""):
        candidate = default
    elif isinstance(value, Path):
        candidate = value
    else:
        candidate = Path(str(value).strip())
    return candidate.expanduser().resolve()


# ---- Settings ---------------------------------------------------------------

class _LenientEnvSettingsSource(EnvSettingsSource):
    """Environment source that preserves raw strings for list-like fields."""

    lenient_fields: ClassVar[set[str]] = _LENIENT_LIST_FIELDS

    def prepare_field_value(
        self, field_name: str, field, value: Any, value_is_complex: bool
    ) -> Any:
        if field_name in self.lenient_fields and isinstance(value, str):
            return value
        return super().prepare_field_value(field_name, field, value, value_is_complex)


class _LenientDotEnvSettingsSource(DotEnvSettingsSource):
    """Dotenv source that preserves raw strings for list-like fields."""

    lenient_fields: ClassVar[set[str]] = _LENIENT_LIST_FIELDS

    def prepare_field_value(
        self, field_name: str, field, value: Any, value_is_complex: bool
    ) -> Any:
        if field_name in self.lenient_fields and isinstance(value, str):
            return value
        return super().prepare_field_value(field_name, field, value, value_is_complex)


class Settings(BaseSettings):
    """FastAPI settings loaded from TRENDIWEAR_* environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TRENDIWEAR_",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        env_source = _LenientEnvSettingsSource(
            settings_cls,
            case_sensitive=getattr(env_settings, "case_sensitive", None),
            env_prefix=getattr(env_settings, "env_prefix", None),
            env_ignore_empty=getattr(env_settings, "env_ignore_empty", None),
        )
        dotenv_source = _LenientDotEnvSettingsSource(
            settings_cls,
            env_file=getattr(dotenv_settings, "env_file", None),
            case_sensitive=getattr(dotenv_settings, "case_sensitive", None),
            env_prefix=getattr(dotenv_settings, "env_prefix", None),
            env_ignore_empty=getattr(dotenv_settings, "env_ignore_empty", None),
        )
        return (init_settings, env_source, dotenv_source, file_secret_settings)

    # Core
    app_name: str = "Trendiwear API"
    app_version: str = "0.4.0"
    api_docs_enabled: bool = True
    docs_url: str = "/docs"
    redoc_url: str = "/redoc"
    openapi_url: str = "/openapi.json"
    logging_level: str = "INFO"
    debug: bool = False

    # Server
    server_public_url: str = DEFAULT_PUBLIC_URL
    server_cors_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    server_host: str = "0.0.0.0"
    server_port: int = Field(8000, ge=1, le=65535)

    # Database
    database_url: str | None = None
    database_echo: bool = False
    database_pool_size: int = Field(5, ge=1)
    database_max_overflow: int = Field(10, ge=0)
    database_pool_timeout: int = Field(30, gt=0)
    database_sqlite_busy_timeout_ms: int = Field(30_000, ge=0)

    # JWT (tokens are issued by the identity provider)
    jwt_secret: SecretStr | None = None
    jwt_algorithm: str = "HS256"
    jwt_audience: str | None = None
    jwt_leeway_seconds: int = Field(30, ge=0)
    auth_auto_provision: bool = True

    # Storage
    storage_dir: Path = Field(default=DEFAULT_STORAGE_DIR)
    storage_bucket: str = "images"
    storage_public_path: str = "/media"
    storage_public_url: str | None = None
    upload_max_bytes: int = Field(5 * 1024 * 1024, gt=0)
    upload_allowed_types: list[str] = Field(default_factory=lambda: list(DEFAULT_UPLOAD_TYPES))
    upload_default_folder: str = "uploads"

    # Commerce
    tax_rate: float = Field(0.16, ge=0, le=1)
    escrow_release_days: int = Field(2, ge=0)
    default_country: str = "Kenya"

    # ---- Validators ----

    @field_validator("server_public_url", mode="before")
    @classmethod
    def _v_public_url(cls, v: Any) -> str:
        s = str(v).strip()
        p = urlparse(s)
        if p.scheme not in {"http", "https"} or not p.netloc:
            raise ValueError("TRENDIWEAR_SERVER_PUBLIC_URL must be an http(s) URL")
        return s.rstrip("/")

    @field_validator("logging_level", mode="before")
    @classmethod
    def _v_log_level(cls, v: Any) -> str:
        s = ("" if v is None else str(v).strip()).upper()
        return s or "INFO"

    @field_validator("server_cors_origins", mode="before")
    @classmethod
    def _v_cors(cls, v: Any) -> list[str]:
        return _list_from_env(v, default=DEFAULT_CORS_ORIGINS)

    @field_validator("upload_allowed_types", mode="before")
    @classmethod
    def _v_upload_types(cls, v: Any) -> list[str]:
        return _list_from_env(v, default=DEFAULT_UPLOAD_TYPES, lower=True)

    @field_validator("storage_public_path", mode="before")
    @classmethod
    def _v_public_path(cls, v: Any) -> str:
        s = str(v or "").strip().strip("/")
        if not s:
            raise ValueError("TRENDIWEAR_STORAGE_PUBLIC_PATH must not be blank")
        return f"/{s}"

    @field_validator("jwt_secret", mode="before")
    @classmethod
    def _v_jwt_secret(cls, v: Any) -> SecretStr | None:
        if v is None:
            return None
        raw = v.get_secret_value() if isinstance(v, SecretStr) else str(v or "").strip()
        if raw and len(raw) < 32:
            raise ValueError("TRENDIWEAR_JWT_SECRET must be at least 32 characters.")
        return SecretStr(raw) if raw else None

    # ---- Finalize ----

    @model_validator(mode="after")
    def _finalize(self) -> Settings:
        self.storage_dir = _resolve_path(self.storage_dir, default=DEFAULT_STORAGE_DIR)

        if not self.database_url:
            sqlite = _resolve_path(DEFAULT_SQLITE_PATH, default=DEFAULT_SQLITE_PATH)
            self.database_url = f"sqlite+aiosqlite:///{sqlite.as_posix()}"

        if not self.storage_public_url:
            self.storage_public_url = f"{self.server_public_url}{self.storage_public_path}"
        self.storage_public_url = self.storage_public_url.rstrip("/")

        if self.jwt_secret is None:
            self.jwt_secret = SecretStr(secrets.token_urlsafe(64))
        return self

    # ---- Convenience ----

    @property
    def jwt_secret_value(self) -> str:
        return self.jwt_secret.get_secret_value()


@lru_cache(maxsize=1)
def _build_settings() -> Settings:
    return Settings()


def get_settings() -> Settings:
    return _build_settings()


def reload_settings() -> Settings:
    _build_settings.cache_clear()
    return _build_settings()


__all__ = [
    "DEFAULT_CORS_ORIGINS",
    "DEFAULT_PAGE_LIMIT",
    "DEFAULT_PUBLIC_URL",
    "MAX_PAGE_LIMIT",
    "Settings",
    "get_settings",
    "reload_settings",
]
