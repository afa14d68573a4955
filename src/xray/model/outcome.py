"""Comparison outcomes.

An outcome is one of three variants. Consumers dispatch on the concrete class
and must reject anything else.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .image import ScreenshotImage


@dataclass(frozen=True)
class Match:
    """The captured screenshot equals the reference."""


@dataclass(frozen=True)
class NoReference:
    """The reference could not be loaded."""

    captured: ScreenshotImage


@dataclass(frozen=True)
class Mismatch:
    """The captured screenshot differs from the reference."""

    actual: ScreenshotImage
    expected: ScreenshotImage


ComparisonOutcome = Union[Match, NoReference, Mismatch]
