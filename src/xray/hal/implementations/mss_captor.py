"""MSS-based screenshot captor."""

from __future__ import annotations

import threading
import time

import mss
from PIL import Image

from ...hardware_exceptions import CaptureFailed
from ...logging import get_logger
from ...model.image import ScreenshotImage
from ..config import HALConfig
from ..interfaces.screenshot_captor import IScreenshotCaptor
from .capture_log import log_capture

logger = get_logger(__name__)


class MSSScreenshotCaptor(IScreenshotCaptor):
    """Reads a region of the display framebuffer using MSS.

    Region coordinates are relative to the virtual desktop, or to the monitor
    given by ``HALConfig.capture_monitor``. Captured pixels are opaque.
    """

    def __init__(self, config: HALConfig | None = None):
        """Initialize MSS screenshot captor.

        Args:
            config: HAL configuration
        """
        self.config = config or HALConfig()
        self._thread_local = threading.local()

    @property
    def sct(self) -> mss.base.MSSBase:
        """Get or create thread-local mss instance.

        mss handles hold platform resources (e.g. Windows GDI contexts) that
        must not cross threads.
        """
        if not hasattr(self._thread_local, "sct"):
            self._thread_local.sct = mss.mss()
            logger.debug("mss_instance_created", thread_id=threading.current_thread().ident)

        return self._thread_local.sct

    def _monitor_offset(self) -> tuple[int, int]:
        monitor = self.config.capture_monitor
        if monitor is None:
            return (0, 0)
        # mss index 0 is the combined virtual monitor
        monitors = self.sct.monitors
        if not 0 <= monitor < len(monitors) - 1:
            raise ValueError(f"Invalid monitor index: {monitor}")
        mon = monitors[monitor + 1]
        return (mon["left"], mon["top"])

    def capture_image(self, x: int, y: int, width: int, height: int) -> ScreenshotImage:
        """Capture a region of the screen.

        Args:
            x: X coordinate of top-left corner
            y: Y coordinate of top-left corner
            width: Region width in pixels
            height: Region height in pixels

        Returns:
            Captured image

        Raises:
            CaptureFailed: If mss cannot grab the region
        """
        if width == 0 or height == 0:
            return ScreenshotImage.new(width, height)

        started = time.perf_counter()
        try:
            offset_x, offset_y = self._monitor_offset()
            region = {"left": x + offset_x, "top": y + offset_y, "width": width, "height": height}
            sct_img = self.sct.grab(region)
            image = Image.frombytes(
                "RGB", (sct_img.width, sct_img.height), sct_img.bgra, "raw", "BGRX"
            )
        except Exception as e:
            logger.error("capture_failed", region=(x, y, width, height), error=str(e))
            raise CaptureFailed(str(e), region=(x, y, width, height)) from e

        if image.size != (width, height):
            raise CaptureFailed(
                f"Backend returned {image.width}x{image.height} instead of {width}x{height}",
                region=(x, y, width, height),
            )

        log_capture(logger, self.config, (x, y, width, height), "mss", started)
        return ScreenshotImage.from_pil(image)

    def close(self) -> None:
        """Close the mss instance of the calling thread."""
        sct = getattr(self._thread_local, "sct", None)
        if sct is not None:
            sct.close()
            del self._thread_local.sct
