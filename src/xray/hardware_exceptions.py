"""Capture backend exceptions."""

from typing import Any

from .base_exceptions import XrayError


class CaptureFailed(XrayError):
    """Raised when the capture backend cannot read the requested region."""

    def __init__(
        self,
        reason: str | None = None,
        region: tuple[int, int, int, int] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize with capture details."""
        super().__init__(
            "Could not take screenshot.",
            error_code="CAPTURE_FAILED",
            context={"reason": reason, "region": region, **kwargs},
        )
        self.reason = reason
        self.region = region
