"""Centralized configuration management for the StayMate listings service."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables defined in a local .env file before instantiating the
# settings singleton so every consumer importing :mod:`staymate.settings` sees the
# same values regardless of entry point (API, CLI, tests).
load_dotenv()

# -- Application-wide constants -------------------------------------------------

PACKAGE_ROOT = Path(__file__).resolve().parent
DEFAULT_DATASET_PATH = PACKAGE_ROOT / "data" / "properties.json"
DEFAULT_FALLBACK_PICTURE = "images/default_picture.jpg"
DEFAULT_FALLBACK_FLOOR_PLAN = "images/default_floorplan.jpg"
DEFAULT_MAP_EMBED_URL = "https://www.google.com/maps"
DEFAULT_LOG_LEVEL = "INFO"


def _normalize_origin(origin: str) -> str:
    """Return the origin stripped of whitespace and trailing slashes."""

    return origin.strip().rstrip("/")


class AppSettings(BaseSettings):
    """Typed configuration surface built on top of ``pydantic-settings``.

    Only the dataset location is required for the service to do anything
    useful, and it defaults to the catalog bundled with the package. Every other
    value tunes presentation helpers (asset fallbacks, map embeds) or the web
    layer.
    """

    _explicit_dataset_path: bool = PrivateAttr(default=False)
    _explicit_cors_allow_origins: bool = PrivateAttr(default=False)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    def __init__(self, **values: object) -> None:  # noqa: D401 - short override explanation
        """Capture explicit overrides prior to delegating to ``BaseSettings``."""

        normalized_keys = {str(key).lower() for key in values}
        super().__init__(**values)
        self._explicit_dataset_path = bool(
            normalized_keys & {"dataset_path", "staymate_dataset_path"}
        )
        self._explicit_cors_allow_origins = bool(
            normalized_keys & {"cors_allow_origins_raw", "cors_allow_origins"}
        )
        dataset_env = os.getenv("STAYMATE_DATASET_PATH")
        if dataset_env is not None and dataset_env.strip():
            self._explicit_dataset_path = True
        cors_env = os.getenv("CORS_ALLOW_ORIGINS")
        if cors_env is not None and cors_env.strip():
            self._explicit_cors_allow_origins = True

    dataset_path: Path = Field(
        default=DEFAULT_DATASET_PATH,
        alias="STAYMATE_DATASET_PATH",
        description=(
            "JSON document holding the property catalog. The file is read once"
            " at startup and treated as read-only afterwards."
        ),
    )
    asset_root: Path | None = Field(
        default=None,
        alias="STAYMATE_ASSET_ROOT",
        description=(
            "Optional directory that relative picture and floor plan references"
            " resolve against. When set, references to missing files fall back"
            " to the default assets."
        ),
    )
    fallback_picture: str = Field(
        default=DEFAULT_FALLBACK_PICTURE,
        alias="STAYMATE_FALLBACK_PICTURE",
        description="Image reference used when a listing has no usable picture.",
    )
    fallback_floor_plan: str = Field(
        default=DEFAULT_FALLBACK_FLOOR_PLAN,
        alias="STAYMATE_FALLBACK_FLOOR_PLAN",
        description="Image reference used when a listing has no usable floor plan.",
    )
    map_embed_url: str = Field(
        default=DEFAULT_MAP_EMBED_URL,
        alias="STAYMATE_MAP_EMBED_URL",
        description="Base URL of the external map service used by the detail view.",
    )
    cors_allow_origins_raw: str | None = Field(
        default=None,
        alias="CORS_ALLOW_ORIGINS",
        description=(
            "Comma-separated list of additional CORS origins supplied via environment variable."
        ),
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        alias="LOG_LEVEL",
        description="Root logging level (e.g. INFO, DEBUG, WARNING).",
    )

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

        if not self._explicit_dataset_path:
            warnings.append(
                "STAYMATE_DATASET_PATH is not set - serving the bundled sample catalog"
            )

        if not self._explicit_cors_allow_origins and not self.cors_allow_origins:
            warnings.append(
                "CORS_ALLOW_ORIGINS is not set - using default localhost origins only "
                "(may cause CORS issues in production)"
            )

        return warnings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return a cached instance of :class:`AppSettings`."""

    return AppSettings()


__all__ = [
    "AppSettings",
    "DEFAULT_DATASET_PATH",
    "DEFAULT_FALLBACK_FLOOR_PLAN",
    "DEFAULT_FALLBACK_PICTURE",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_MAP_EMBED_URL",
    "get_settings",
]
