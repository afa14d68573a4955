"""Configuration package.

Usage:
    from xray.config import get_settings

    settings = get_settings()
    print(settings.references_path)
"""

from .settings import XraySettings, get_settings, reset_settings

__all__ = ["XraySettings", "get_settings", "reset_settings"]
