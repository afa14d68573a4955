"""Pillow ImageGrab-based screenshot captor."""

import time

from PIL import ImageGrab

from ...hardware_exceptions import CaptureFailed
from ...logging import get_logger
from ...model.image import ScreenshotImage
from ..config import HALConfig
from ..interfaces.screenshot_captor import IScreenshotCaptor
from .capture_log import log_capture

logger = get_logger(__name__)


class PillowScreenshotCaptor(IScreenshotCaptor):
    """Captures screen regions with ``PIL.ImageGrab``.

    Slower than MSS, but needs nothing beyond Pillow.
    """

    def __init__(self, config: HALConfig | None = None):
        self.config = config or HALConfig()

    def capture_image(self, x: int, y: int, width: int, height: int) -> ScreenshotImage:
        if width == 0 or height == 0:
            return ScreenshotImage.new(width, height)

        bbox = (x, y, x + width, y + height)
        started = time.perf_counter()
        try:
            image = ImageGrab.grab(bbox=bbox, all_screens=True)
        except Exception as e:
            logger.error("capture_failed", region=(x, y, width, height), error=str(e))
            raise CaptureFailed(str(e), region=(x, y, width, height)) from e

        if image.size != (width, height):
            raise CaptureFailed(
                f"Backend returned {image.width}x{image.height} instead of {width}x{height}",
                region=(x, y, width, height),
            )

        log_capture(logger, self.config, (x, y, width, height), "pillow", started)
        # Screen grabs are opaque; drop whatever alpha the platform reports
        return ScreenshotImage.from_pil(image.convert("RGB"))
