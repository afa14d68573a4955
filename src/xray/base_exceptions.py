"""Base exception classes for xray.

This module contains the root exception hierarchy that all other
xray exceptions inherit from.
"""

from typing import Any


class XrayException(Exception):
    """Base exception for all xray errors.

    Attributes:
        message: Human-readable error message
        error_code: Optional error code for programmatic handling
        context: Additional context information
    """

    def __init__(
        self, message: str, error_code: str | None = None, context: dict[str, Any] | None = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message
            error_code: Optional error code
            context: Optional context dictionary
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation."""
        if self.error_code:
            return f"[{self.error_code}] {self.message}"
        return self.message


class XrayError(XrayException):
    """Base for every failure a screenshot test can report.

    ``screenshot_test`` returns instances of this class instead of raising them.
    """

    pass


class InvalidImageError(XrayException, ValueError):
    """Raised when pixel data does not match the declared dimensions."""

    def __init__(self, width: int, height: int, length: int) -> None:
        """Initialize with the offending dimensions."""
        super().__init__(
            f"Pixel buffer of {length} bytes does not match a {width}x{height} RGBA image "
            f"({width * height * 4} bytes expected)",
            error_code="INVALID_IMAGE",
            context={"width": width, "height": height, "length": length},
        )
