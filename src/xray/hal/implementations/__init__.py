"""HAL implementation modules.

The capture backends import their platform libraries on first access.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Storage implementations
from .fs_screenshot_io import FsScreenshotIo

if TYPE_CHECKING:
    from .mss_captor import MSSScreenshotCaptor
    from .pillow_captor import PillowScreenshotCaptor

__all__ = [
    "FsScreenshotIo",
    "MSSScreenshotCaptor",
    "PillowScreenshotCaptor",
]


def __getattr__(name: str):
    """Lazy import for capture implementations."""
    if name == "MSSScreenshotCaptor":
        from .mss_captor import MSSScreenshotCaptor

        return MSSScreenshotCaptor

    if name == "PillowScreenshotCaptor":
        from .pillow_captor import PillowScreenshotCaptor

        return PillowScreenshotCaptor

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
