"""Unit tests covering the typed application settings implementation."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from staymate.main import _combine_origins, _validate_environment
from staymate.settings import (
    DEFAULT_DATASET_PATH,
    DEFAULT_FALLBACK_FLOOR_PLAN,
    DEFAULT_MAP_EMBED_URL,
    AppSettings,
)


@pytest.fixture(autouse=True)
def _clear_staymate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "STAYMATE_DATASET_PATH",
        "STAYMATE_ASSET_ROOT",
        "STAYMATE_FALLBACK_FLOOR_PLAN",
        "STAYMATE_MAP_EMBED_URL",
        "CORS_ALLOW_ORIGINS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults_point_at_bundled_catalog() -> None:
    configured = AppSettings()

    assert configured.dataset_path == DEFAULT_DATASET_PATH
    assert configured.dataset_path.is_file()
    assert configured.fallback_floor_plan == DEFAULT_FALLBACK_FLOOR_PLAN
    assert configured.map_embed_url == DEFAULT_MAP_EMBED_URL
    assert configured.asset_root is None


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("STAYMATE_DATASET_PATH", str(tmp_path / "listings.json"))
    monkeypatch.setenv("STAYMATE_ASSET_ROOT", str(tmp_path))
    monkeypatch.setenv("STAYMATE_FALLBACK_FLOOR_PLAN", "static/no-plan.png")

    configured = AppSettings()

    assert configured.dataset_path == tmp_path / "listings.json"
    assert configured.asset_root == tmp_path
    assert configured.fallback_floor_plan == "static/no-plan.png"


def test_cors_origins_are_normalised(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", " https://a.example.com/ ,,https://b.example.com")

    configured = AppSettings()

    assert configured.cors_allow_origins == ["https://a.example.com", "https://b.example.com"]


def test_combine_origins_deduplicates_preserving_order() -> None:
    combined = _combine_origins(
        ["http://localhost:3000", "http://localhost"],
        ["http://localhost:3000/", "https://a.example.com"],
    )

    assert combined == ["http://localhost:3000", "http://localhost", "https://a.example.com"]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("chatty", logging.INFO)],
)
def test_log_level_numeric(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int) -> None:
    monkeypatch.setenv("LOG_LEVEL", raw)

    assert AppSettings().log_level_numeric == expected


def test_optional_config_warnings_default() -> None:
    """Default configuration should warn when optional settings remain unset."""

    warnings = AppSettings().optional_config_warnings()

    assert any("STAYMATE_DATASET_PATH" in warning for warning in warnings)
    assert any("CORS_ALLOW_ORIGINS" in warning for warning in warnings)


def test_optional_config_warnings_clear_when_values_provided(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("STAYMATE_DATASET_PATH", str(DEFAULT_DATASET_PATH))
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://example.com")

    assert AppSettings().optional_config_warnings() == []


def test_explicit_keyword_suppresses_dataset_warning() -> None:
    warnings = AppSettings(dataset_path=DEFAULT_DATASET_PATH).optional_config_warnings()

    assert not any("STAYMATE_DATASET_PATH" in warning for warning in warnings)


def test_validate_environment_logging(caplog: pytest.LogCaptureFixture) -> None:
    """The environment validator should emit warnings when optional inputs are absent."""

    with caplog.at_level(logging.WARNING):
        _validate_environment(active_settings=AppSettings())

    assert "Environment Configuration Warnings" in caplog.text
    assert "STAYMATE_DATASET_PATH is not set" in caplog.text
    assert "CORS_ALLOW_ORIGINS is not set" in caplog.text


def test_validate_environment_silent_when_overrides_present(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setenv("STAYMATE_DATASET_PATH", str(DEFAULT_DATASET_PATH))
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://example.com")

    with caplog.at_level(logging.WARNING):
        _validate_environment(active_settings=AppSettings())

    assert "Environment Configuration Warnings" not in caplog.text
