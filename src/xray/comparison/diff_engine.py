"""Pixel diff between a captured screenshot and its reference."""

from __future__ import annotations

import numpy as np

from ..model.image import ScreenshotImage


def _expected_aligned_to(actual: ScreenshotImage, expected: ScreenshotImage) -> np.ndarray:
    """Crop or pad ``expected`` to the dimensions of ``actual``.

    Pixels of ``actual`` that fall outside ``expected`` are compared against
    transparent black, so padding is all zeros.
    """
    aligned = np.zeros((actual.height, actual.width, 4), dtype=np.uint8)
    rows = min(actual.height, expected.height)
    cols = min(actual.width, expected.width)
    if rows and cols:
        aligned[:rows, :cols] = expected.to_array()[:rows, :cols]
    return aligned


def _difference_mask(actual: ScreenshotImage, expected: ScreenshotImage) -> np.ndarray:
    return np.any(actual.to_array() != _expected_aligned_to(actual, expected), axis=2)


def diff_images(actual: ScreenshotImage, expected: ScreenshotImage) -> ScreenshotImage:
    """Create an image diff between two images.

    The result has the size of ``actual``. Every pixel of ``actual`` that differs
    from the same pixel in ``expected`` is copied unmodified; every matching pixel
    is transparent black. If ``expected`` is smaller than ``actual``, pixels
    outside its bounds are taken to be transparent black.

    Args:
        actual: The captured screenshot
        expected: The reference image

    Returns:
        Diff image with the dimensions of ``actual``
    """
    mask = _difference_mask(actual, expected)
    diff = np.zeros((actual.height, actual.width, 4), dtype=np.uint8)
    diff[mask] = actual.to_array()[mask]
    return ScreenshotImage.from_array(diff)


def count_differing_pixels(actual: ScreenshotImage, expected: ScreenshotImage) -> int:
    """Count pixels of ``actual`` that differ from ``expected`` under the diff rules."""
    return int(np.count_nonzero(_difference_mask(actual, expected)))
