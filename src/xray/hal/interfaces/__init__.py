"""HAL Interface definitions.

These interfaces define the contracts that all capture and storage
implementations must follow.
"""

from .screenshot_captor import IScreenshotCaptor
from .screenshot_io import IScreenshotIo

__all__ = ["IScreenshotCaptor", "IScreenshotIo"]
