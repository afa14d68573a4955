"""Screenshot capture interface definition."""

from abc import ABC, abstractmethod

from ...model.image import ScreenshotImage


class IScreenshotCaptor(ABC):
    """Captures a region of a live rendering surface."""

    @abstractmethod
    def capture_image(self, x: int, y: int, width: int, height: int) -> ScreenshotImage:
        """Take a screenshot of the area ``(x, y, x + width, y + height)``.

        Args:
            x: X coordinate of top-left corner
            y: Y coordinate of top-left corner
            width: Region width in pixels
            height: Region height in pixels

        Returns:
            Image of exactly ``width`` x ``height`` pixels

        Raises:
            CaptureFailed: If the underlying capture mechanism reports an error
        """
        pass
