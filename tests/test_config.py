from __future__ import annotations

from pathlib import Path

from mockapi.core import config as core_config


def test_settings_read_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("MOCK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("MOCK_PRELOAD", "yes")
    monkeypatch.setenv("CORS_ORIGINS", "https://dash.example.com/, http://localhost:5173")
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
    finally:
        core_config.get_settings.cache_clear()
    assert settings.data_dir == Path(tmp_path)
    assert settings.log_level == "DEBUG"
    assert settings.preload_collections is True
    assert settings.cors_origins == ("https://dash.example.com", "http://localhost:5173")


def test_settings_defaults(monkeypatch):
    for name in ("MOCK_DATA_DIR", "LOG_LEVEL", "MOCK_PRELOAD", "CORS_ORIGINS", "APP_ENV"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    try:
        settings = core_config.get_settings()
    finally:
        core_config.get_settings.cache_clear()
    assert settings.app_env == "dev"
    assert settings.data_dir == core_config.DEFAULT_DATA_DIR
    assert settings.preload_collections is False
