"""Pytest configuration and fixtures."""

import os

# Keep test output clean; must be set before xray configures logging on import
os.environ.setdefault("XRAY_DISABLE_CONSOLE_LOGGING", "1")

import pytest

from xray.config import reset_settings
from xray.hal.config import reset_config
from xray.model.image import ScreenshotImage

_XRAY_ENV_VARS = [
    "XRAY_REFERENCES_PATH",
    "XRAY_OUTPUT_PATH",
    "XRAY_DEBUG_MODE",
    "XRAY_LOG_LEVEL",
    "XRAY_LOG_PATH",
    "XRAY_CAPTURE_BACKEND",
    "XRAY_CAPTURE_MONITOR",
    "XRAY_HAL_DEBUG",
]


@pytest.fixture(autouse=True)
def isolated_configuration(monkeypatch):
    """Reset settings singletons and XRAY_* variables around every test."""
    for name in _XRAY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_config()
    yield
    reset_settings()
    reset_config()


RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)
CLEAR = (0, 0, 0, 0)


def image_from_pixels(width: int, height: int, pixels: list[tuple[int, int, int, int]]) -> ScreenshotImage:
    """Build an image from a row-major list of RGBA tuples."""
    return ScreenshotImage.from_bytes(width, height, bytes(c for pixel in pixels for c in pixel))


@pytest.fixture
def rgbw() -> ScreenshotImage:
    """2x2 image: red, green / blue, white."""
    return image_from_pixels(2, 2, [RED, GREEN, BLUE, WHITE])


@pytest.fixture
def rbgw() -> ScreenshotImage:
    """2x2 image: red, blue / green, white."""
    return image_from_pixels(2, 2, [RED, BLUE, GREEN, WHITE])


@pytest.fixture
def rbgw_vs_rgbw_diff() -> ScreenshotImage:
    """Diff of ``rbgw`` (actual) against ``rgbw`` (expected)."""
    return image_from_pixels(2, 2, [CLEAR, BLUE, GREEN, CLEAR])
