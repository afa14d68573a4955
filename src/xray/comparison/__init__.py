"""Comparison and diffing of screenshots."""

from .comparator import compare_screenshot_images
from .diff_engine import count_differing_pixels, diff_images

__all__ = ["compare_screenshot_images", "diff_images", "count_differing_pixels"]
