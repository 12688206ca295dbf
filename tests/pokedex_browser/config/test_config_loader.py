from __future__ import annotations

import json

import pytest

from pokedex_browser.config.config_loader import load_settings
from pokedex_browser.config.model import AppSettings
from pokedex_browser.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in ("POKEDEX_API_BASE_URL", "POKEDEX_MAX_RECORDS", "POKEDEX_REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


def _write_global(tmp_path, raw):
    (tmp_path / "global.json").write_text(json.dumps(raw), encoding="utf-8")


def test_missing_global_json_uses_defaults(tmp_path):
    assert load_settings(tmp_path) == AppSettings()


def test_global_json_values_are_loaded(tmp_path):
    _write_global(
        tmp_path,
        {
            "ui_title": "My Dex",
            "api_base_url": "https://example.test/api/v2/",
            "max_records": 151,
            "request_timeout": 3,
            "max_workers": 4,
        },
    )

    settings = load_settings(tmp_path)

    assert settings.ui_title == "My Dex"
    assert settings.api_base_url == "https://example.test/api/v2"
    assert settings.max_records == 151
    assert settings.request_timeout == 3.0
    assert settings.max_workers == 4


def test_env_overrides_win(tmp_path, monkeypatch):
    _write_global(tmp_path, {"max_records": 151})
    monkeypatch.setenv("POKEDEX_MAX_RECORDS", "50")
    monkeypatch.setenv("POKEDEX_API_BASE_URL", "http://localhost:8000/api/v2")

    settings = load_settings(tmp_path)

    assert settings.max_records == 50
    assert settings.api_base_url == "http://localhost:8000/api/v2"


def test_bad_number_raises_config_error(tmp_path):
    _write_global(tmp_path, {"max_records": "lots"})
    with pytest.raises(ConfigError, match="max_records"):
        load_settings(tmp_path)


def test_non_positive_value_raises_config_error(tmp_path):
    _write_global(tmp_path, {"max_workers": 0})
    with pytest.raises(ConfigError):
        load_settings(tmp_path)


def test_invalid_json_raises_config_error(tmp_path):
    (tmp_path / "global.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_settings(tmp_path)
