"""MockScreenshotCaptor - returns a fixed image instead of reading the screen.

Enables:
- Headless execution (no display needed)
- Deterministic screenshots for exercising the comparison pipeline
- Simulated capture failures
"""

from __future__ import annotations

from typing import cast

from ..base_exceptions import XrayError
from ..hal.interfaces.screenshot_captor import IScreenshotCaptor
from ..logging import get_logger
from ..model.image import ScreenshotImage
from ..model.region import Region

logger = get_logger(__name__)


class MockScreenshotCaptor(IScreenshotCaptor):
    """Captor returning a preset image, or raising a preset error.

    Example:
        captor = MockScreenshotCaptor(ScreenshotImage.new(2, 2, (255, 0, 0, 255)))
        image = captor.capture_image(0, 0, 2, 2)
        assert captor.requests == [Region(0, 0, 2, 2)]
    """

    def __init__(
        self, screenshot: ScreenshotImage | None = None, error: XrayError | None = None
    ) -> None:
        """Initialize mock captor.

        Args:
            screenshot: Image returned by every capture
            error: Error raised by every capture, takes precedence over ``screenshot``
        """
        if screenshot is None and error is None:
            raise ValueError("MockScreenshotCaptor needs a screenshot or an error")
        self.screenshot = screenshot
        self.error = error
        self.requests: list[Region] = []

    def capture_image(self, x: int, y: int, width: int, height: int) -> ScreenshotImage:
        self.requests.append(Region(x, y, width, height))
        if self.error is not None:
            logger.debug("mock_capture_failed", region=(x, y, width, height))
            raise self.error
        return cast(ScreenshotImage, self.screenshot)
