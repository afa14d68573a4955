"""Factory for the default screenshot captor."""

from .config import CaptureBackend, HALConfig, get_config
from .interfaces.screenshot_captor import IScreenshotCaptor


def create_screenshot_captor(config: HALConfig | None = None) -> IScreenshotCaptor:
    """Create the screenshot captor selected by configuration.

    A new instance is returned on every call so that each test owns its captor.

    Args:
        config: Optional configuration override

    Returns:
        IScreenshotCaptor implementation

    Raises:
        ValueError: If backend is not supported
    """
    config = config or get_config()
    backend = config.capture_backend.lower()

    if backend == CaptureBackend.MSS.value:
        from .implementations.mss_captor import MSSScreenshotCaptor

        return MSSScreenshotCaptor(config)
    if backend == CaptureBackend.PILLOW.value:
        from .implementations.pillow_captor import PillowScreenshotCaptor

        return PillowScreenshotCaptor(config)

    raise ValueError(f"Unsupported screen capture backend: {backend}")
