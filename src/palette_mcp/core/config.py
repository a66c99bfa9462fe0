"""Core configuration - centralized config for the palette_mcp package.

All environment-based configuration should flow through this module.

Usage:
    from palette_mcp.core.config import get_config
    config = get_config()

    server_name = config.server_name
    log_level = config.log_level
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .aliases import MODE_ALIASES


class PaletteSettings(BaseSettings):
    """Configuration settings for palette-mcp.

    Settings can be configured via environment variables with the
    PALETTE_ prefix, or through a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # SERVER SETTINGS
    # ==========================================================================

    server_name: str = Field(
        default="rampensau",
        description="MCP server name announced to clients",
        validation_alias="PALETTE_SERVER_NAME",
    )
    server_description: str = Field(
        default="Colour-palette and helper utilities from RampenSau.",
        description="Human-readable server description",
        validation_alias="PALETTE_SERVER_DESCRIPTION",
    )
    default_css_mode: str = Field(
        default="oklch",
        description="Colour space used by toCSS when no mode is given",
        validation_alias="PALETTE_DEFAULT_CSS_MODE",
    )

    # ==========================================================================
    # LOGGING SETTINGS
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="PALETTE_LOG_LEVEL",
    )
    log_format: str = Field(
        default="",
        description="Log format: 'json', 'text', or '' (auto-detect)",
        validation_alias="PALETTE_LOG_FORMAT",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (optional)",
        validation_alias="PALETTE_LOG_FILE",
    )

    @field_validator("default_css_mode")
    @classmethod
    def _resolve_css_mode(cls, value: str) -> str:
        if value not in MODE_ALIASES:
            raise ValueError(f"default_css_mode must be one of: {', '.join(MODE_ALIASES)}")
        return MODE_ALIASES[value]


# ==========================================================================
# GLOBAL CONFIG INSTANCE (lazy loaded)
# ==========================================================================

_config: PaletteSettings | None = None


def get_config() -> PaletteSettings:
    """Get the global configuration instance.

    Returns:
        The singleton PaletteSettings instance.
    """
    global _config
    if _config is None:
        _config = PaletteSettings()
    return _config


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing."""
    global _config
    _config = None
