"""Value types used throughout xray."""

from .image import TRANSPARENT, Pixel, ScreenshotImage
from .outcome import ComparisonOutcome, Match, Mismatch, NoReference
from .region import Region

__all__ = [
    "ScreenshotImage",
    "Pixel",
    "TRANSPARENT",
    "Region",
    "ComparisonOutcome",
    "Match",
    "NoReference",
    "Mismatch",
]
