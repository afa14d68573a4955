"""Screenshot test orchestration."""

from .orchestrator import (
    ScreenshotTestPhase,
    ScreenshotTestResult,
    assert_screenshot_test,
    default_screenshot_test,
    screenshot_test,
)

__all__ = [
    "screenshot_test",
    "assert_screenshot_test",
    "default_screenshot_test",
    "ScreenshotTestPhase",
    "ScreenshotTestResult",
]
