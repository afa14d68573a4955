"""Capture region."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle in capture-target coordinates.

    ``x`` and ``y`` may be negative (e.g. monitors left of the primary one);
    ``width`` and ``height`` may be zero but never negative.
    """

    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Region size must be non-negative, got {self.width}x{self.height}"
            )

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_empty(self) -> bool:
        return self.area == 0

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Get region as ``(x, y, width, height)``."""
        return (self.x, self.y, self.width, self.height)
