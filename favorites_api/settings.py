"""Centralized configuration management for the favorites API."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load a local .env before the settings singleton is built so every importer of
# this module sees the same environment.
load_dotenv()

# -- Application-wide constants -------------------------------------------------

DEFAULT_CATALOG_SEED_PATH = "data/seed_assets.json"
DEFAULT_APP_VERSION = "0.1"
DEFAULT_LOG_LEVEL = "INFO"


def _normalize_origin(origin: str) -> str:
    """Return the origin stripped of whitespace and trailing slashes."""

    return origin.strip().rstrip("/")


class AppSettings(BaseSettings):
    """Typed configuration surface built on top of ``pydantic-settings``.

    Values come from the process environment or a ``.env`` file.  Helper
    properties expose parsed forms (paths, numeric log levels, origin lists) so
    the application factory does not repeat parsing logic.
    """

    _explicit_seed_path: bool = PrivateAttr(default=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    def __init__(self, **values: object) -> None:
        """Remember whether the seed path was supplied explicitly."""

        normalized_keys = {str(key).lower() for key in values}
        super().__init__(**values)
        self._explicit_seed_path = "catalog_seed_path" in normalized_keys
        seed_env = os.getenv("CATALOG_SEED_PATH")
        if seed_env is not None and seed_env.strip():
            self._explicit_seed_path = True

    catalog_seed_path: str = Field(
        default=DEFAULT_CATALOG_SEED_PATH,
        alias="CATALOG_SEED_PATH",
        description=(
            "JSON document loaded into the asset catalog at startup. A missing"
            " file leaves the catalog empty."
        ),
    )
    validate_seed_assets: bool = Field(
        default=True,
        alias="VALIDATE_SEED_ASSETS",
        description=(
            "Run asset validation on seed records and skip the ones that fail"
            " instead of loading them as-is."
        ),
    )
    app_version: str = Field(
        default=DEFAULT_APP_VERSION,
        alias="FAVORITES_API_VERSION",
        description="Version string reported by the health endpoint.",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        alias="LOG_LEVEL",
        description="Root logging level (e.g. INFO, DEBUG, WARNING).",
    )
    cors_allow_origins_raw: str | None = Field(
        default=None,
        alias="CORS_ALLOW_ORIGINS",
        description="Comma-separated list of browser origins allowed by CORS.",
    )

    @property
    def seed_path(self) -> Path:
        return Path(self.catalog_seed_path).expanduser()

    @property
    def cors_allow_origins(self) -> list[str]:
        """Return normalised CORS origins supplied via environment variables."""

        if not self.cors_allow_origins_raw:
            return []

        origins = [
            _normalize_origin(origin)
            for origin in self.cors_allow_origins_raw.split(",")
            if origin.strip()
        ]
        return [origin for origin in origins if origin]

    @property
    def log_level_numeric(self) -> int:
        """Translate ``log_level`` into the numeric constant expected by logging."""

        candidate = logging.getLevelName(self.log_level.upper())
        if isinstance(candidate, int):
            return candidate
        return logging.INFO

    def optional_config_warnings(self) -> list[str]:
        """Return human-readable warnings for unset optional configuration."""

        warnings: list[str] = []

        if not self._explicit_seed_path:
            warnings.append(
                "CATALOG_SEED_PATH is not set - falling back to "
                f"{DEFAULT_CATALOG_SEED_PATH}"
            )

        if not self.cors_allow_origins:
            warnings.append(
                "CORS_ALLOW_ORIGINS is not set - cross-origin browser requests "
                "will be rejected"
            )

        return warnings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return a cached instance of :class:`AppSettings`."""

    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_APP_VERSION",
    "DEFAULT_CATALOG_SEED_PATH",
    "DEFAULT_LOG_LEVEL",
    "get_settings",
]
