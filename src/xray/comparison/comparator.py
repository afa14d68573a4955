"""Exact screenshot comparison."""

from ..logging import get_logger
from ..model.image import ScreenshotImage
from ..model.outcome import Match, Mismatch

logger = get_logger(__name__)


def compare_screenshot_images(
    reference_image: ScreenshotImage, actual_image: ScreenshotImage
) -> Match | Mismatch:
    """Compare a captured screenshot with its reference.

    The images are equal iff their dimensions and raw RGBA bytes are identical.
    There is no tolerance: a single differing byte is a mismatch.

    Args:
        reference_image: The baseline image
        actual_image: The captured screenshot

    Returns:
        ``Match`` or ``Mismatch(actual_image, reference_image)``
    """
    if (
        reference_image.size == actual_image.size
        and reference_image.pixels == actual_image.pixels
    ):
        return Match()

    logger.debug(
        "screenshot_compared",
        matched=False,
        actual_size=actual_image.size,
        reference_size=reference_image.size,
    )
    return Mismatch(actual=actual_image, expected=reference_image)
