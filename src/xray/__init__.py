"""xray - screenshot testing for graphical applications.

For the most basic usage, call ``default_screenshot_test``. It captures the given
screen region and compares it to ``references/<test name>.png``:

    from xray import default_screenshot_test

    def test_main_menu():
        render_main_menu()
        default_screenshot_test("menus/main", 0, 0, 640, 480)

To customise the behaviour, call ``screenshot_test`` (returns a
``ScreenshotTestResult``) or ``assert_screenshot_test`` (raises on failure) with
your own ``IScreenshotIo`` and ``IScreenshotCaptor``:

1. ``IScreenshotIo`` decides where references are read from and artifacts are
   written to. ``FsScreenshotIo`` accepts custom paths; implement the interface
   to use e.g. a web service instead.
2. ``IScreenshotCaptor`` decides how screenshots are taken.
"""

from typing import TYPE_CHECKING

from .base_exceptions import InvalidImageError, XrayError, XrayException
from .comparison import compare_screenshot_images, count_differing_pixels, diff_images
from .comparison_exceptions import (
    NoReferenceScreenshot,
    ScreenshotAssertionError,
    ScreenshotComparisonError,
    ScreenshotMismatch,
)
from .hal import HALConfig, IScreenshotCaptor, IScreenshotIo, create_screenshot_captor
from .hal.implementations import FsScreenshotIo
from .hardware_exceptions import CaptureFailed
from .io_exceptions import (
    FailedLoadingReference,
    FailedWritingArtifact,
    OutputLocationUnavailable,
    ScreenshotIoError,
)
from .model import ComparisonOutcome, Match, Mismatch, NoReference, Region, ScreenshotImage
from .orchestration import (
    ScreenshotTestPhase,
    ScreenshotTestResult,
    assert_screenshot_test,
    default_screenshot_test,
    screenshot_test,
)

if TYPE_CHECKING:
    from .hal.implementations import MSSScreenshotCaptor, PillowScreenshotCaptor

__version__ = "0.3.0"

__all__ = [
    # Entry points
    "screenshot_test",
    "assert_screenshot_test",
    "default_screenshot_test",
    "ScreenshotTestPhase",
    "ScreenshotTestResult",
    # Comparison
    "compare_screenshot_images",
    "diff_images",
    "count_differing_pixels",
    # Model
    "ScreenshotImage",
    "Region",
    "ComparisonOutcome",
    "Match",
    "NoReference",
    "Mismatch",
    # Capture and storage
    "IScreenshotCaptor",
    "IScreenshotIo",
    "FsScreenshotIo",
    "MSSScreenshotCaptor",
    "PillowScreenshotCaptor",
    "HALConfig",
    "create_screenshot_captor",
    # Errors
    "XrayException",
    "XrayError",
    "InvalidImageError",
    "ScreenshotIoError",
    "OutputLocationUnavailable",
    "FailedWritingArtifact",
    "FailedLoadingReference",
    "CaptureFailed",
    "ScreenshotComparisonError",
    "NoReferenceScreenshot",
    "ScreenshotMismatch",
    "ScreenshotAssertionError",
]


def __getattr__(name: str):
    """Lazy import for the capture backends."""
    if name in ("MSSScreenshotCaptor", "PillowScreenshotCaptor"):
        from .hal import implementations

        return getattr(implementations, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
