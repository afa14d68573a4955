"""Hardware Abstraction Layer for xray.

Capture and storage are pluggable: implement ``IScreenshotCaptor`` or
``IScreenshotIo`` to replace the defaults.
"""

from .config import CaptureBackend, HALConfig, get_config, reset_config, set_config
from .factory import create_screenshot_captor
from .interfaces import IScreenshotCaptor, IScreenshotIo

__all__ = [
    "HALConfig",
    "CaptureBackend",
    "get_config",
    "set_config",
    "reset_config",
    "create_screenshot_captor",
    "IScreenshotCaptor",
    "IScreenshotIo",
]
