"""HAL configuration management."""

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CaptureBackend(Enum):
    """Available screen capture backends."""

    MSS = "mss"
    PILLOW = "pillow"


def _optional_int(value: str | None) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


@dataclass
class HALConfig:
    """HAL configuration settings.

    Configuration can be set via:
    1. Environment variables (XRAY_* prefix)
    2. Direct instantiation
    """

    capture_backend: str = field(
        default_factory=lambda: os.getenv("XRAY_CAPTURE_BACKEND", CaptureBackend.MSS.value)
    )
    capture_monitor: int | None = field(
        default_factory=lambda: _optional_int(os.getenv("XRAY_CAPTURE_MONITOR"))
    )
    """Monitor index (0-based) that region coordinates are relative to, None for the virtual desktop."""

    debug_mode: bool = field(
        default_factory=lambda: os.getenv("XRAY_HAL_DEBUG", "false").lower() == "true"
    )

    def validate(self) -> bool:
        """Validate configuration settings.

        Returns:
            True if configuration is valid

        Raises:
            ValueError: If configuration is invalid
        """
        if self.capture_backend not in [b.value for b in CaptureBackend]:
            raise ValueError(f"Invalid capture backend: {self.capture_backend}")

        if self.capture_monitor is not None and self.capture_monitor < 0:
            raise ValueError("Capture monitor index must be non-negative")

        return True

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "capture_backend": self.capture_backend,
            "capture_monitor": self.capture_monitor,
            "debug_mode": self.debug_mode,
        }

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "HALConfig":
        """Create configuration from dictionary."""
        return cls(**config_dict)

    def __str__(self) -> str:
        return f"HALConfig(capture={self.capture_backend}, monitor={self.capture_monitor})"


# Global configuration instance
_config: HALConfig | None = None


def get_config() -> HALConfig:
    """Get global HAL configuration.

    Returns:
        HALConfig instance
    """
    global _config
    if _config is None:
        _config = HALConfig()
        _config.validate()
    return _config


def set_config(config: HALConfig) -> None:
    """Set global HAL configuration.

    Args:
        config: New configuration
    """
    global _config
    config.validate()
    _config = config


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _config
    _config = None
