"""In-memory capture and storage for headless tests."""

from .mock_captor import MockScreenshotCaptor
from .mock_screenshot_io import MockScreenshotIo

__all__ = ["MockScreenshotCaptor", "MockScreenshotIo"]
