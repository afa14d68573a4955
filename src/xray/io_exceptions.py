"""Reference loading and artifact persistence exceptions."""

from .base_exceptions import XrayError


class ScreenshotIoError(XrayError):
    """Base exception for storage errors."""

    pass


class OutputLocationUnavailable(ScreenshotIoError):
    """Raised when the artifact destination cannot be created."""

    def __init__(self, location: str) -> None:
        """Initialize with the unavailable location."""
        super().__init__(
            f"Could not write to output location: {location}",
            error_code="OUTPUT_LOCATION_UNAVAILABLE",
            context={"location": location},
        )
        self.location = location


class FailedWritingArtifact(ScreenshotIoError):
    """Raised when one of actual/expected/diff could not be persisted."""

    def __init__(self, name: str, reason: str) -> None:
        """Initialize with artifact name and failure reason."""
        super().__init__(
            f"Could not write screenshot {name}:\n{reason}",
            error_code="ARTIFACT_WRITE_FAILED",
            context={"name": name, "reason": reason},
        )
        self.name = name
        self.reason = reason


class FailedLoadingReference(ScreenshotIoError):
    """Raised when the reference image is missing or unreadable."""

    def __init__(self, reason: str | None = None) -> None:
        """Initialize with an optional reason."""
        super().__init__(
            "Reference image could not be loaded or parsed",
            error_code="REFERENCE_LOAD_FAILED",
            context={"reason": reason},
        )
        self.reason = reason
