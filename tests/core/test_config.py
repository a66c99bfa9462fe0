"""Tests for palette_mcp.core.config - PaletteSettings and global config management."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from palette_mcp.core.config import PaletteSettings, clear_config_cache, get_config


class TestDefaults:
    def test_server_defaults(self, clean_env):
        settings = PaletteSettings()

        assert settings.server_name == "rampensau"
        assert "RampenSau" in settings.server_description
        assert settings.default_css_mode == "oklch"

    def test_logging_defaults(self, clean_env):
        settings = PaletteSettings()

        assert settings.log_level == "INFO"
        assert settings.log_format == ""
        assert settings.log_file is None


class TestEnvironmentOverrides:
    def test_server_name(self, clean_env, monkeypatch):
        monkeypatch.setenv("PALETTE_SERVER_NAME", "palettes")
        assert PaletteSettings().server_name == "palettes"

    def test_logging(self, clean_env, monkeypatch):
        monkeypatch.setenv("PALETTE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("PALETTE_LOG_FORMAT", "json")
        monkeypatch.setenv("PALETTE_LOG_FILE", "/tmp/palette.log")
        settings = PaletteSettings()

        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"
        assert settings.log_file == "/tmp/palette.log"

    def test_css_mode_alias_resolved(self, clean_env, monkeypatch):
        monkeypatch.setenv("PALETTE_DEFAULT_CSS_MODE", "css")
        assert PaletteSettings().default_css_mode == "hsl"

    def test_unknown_css_mode_rejected(self, clean_env, monkeypatch):
        monkeypatch.setenv("PALETTE_DEFAULT_CSS_MODE", "rgb")
        with pytest.raises(ValidationError):
            PaletteSettings()


class TestSingleton:
    def test_get_config_cached(self, clean_env):
        assert get_config() is get_config()

    def test_clear_config_cache(self, clean_env, monkeypatch):
        first = get_config()
        monkeypatch.setenv("PALETTE_SERVER_NAME", "other")
        clear_config_cache()
        second = get_config()

        assert second is not first
        assert second.server_name == "other"
