"""Configuration management for xray using pydantic-settings.

Settings are read from ``XRAY_*`` environment variables and an optional
``.env`` file.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class XraySettings(BaseSettings):
    """Main configuration settings for xray."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="XRAY_",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage settings
    references_path: Path = Field(
        Path("references"), description="Root directory holding <test_name>.png references"
    )
    output_path: Path = Field(
        Path("test_output"), description="Root directory for failure artifacts"
    )

    # Logging settings
    debug_mode: bool = Field(False, description="Enable debug logging")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "WARNING", description="Log level when debug mode is off"
    )
    log_path: Path | None = Field(None, description="Directory for log files, none to disable")


# Singleton instance
_settings: XraySettings | None = None


def get_settings() -> XraySettings:
    """Get the singleton settings instance.

    Returns:
        XraySettings instance
    """
    global _settings

    if _settings is None:
        _settings = XraySettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
