"""Comparison failures and the assertion raised by the panicking wrapper."""

from __future__ import annotations

from .base_exceptions import XrayError
from .comparison.diff_engine import count_differing_pixels
from .model.outcome import ComparisonOutcome, Match, Mismatch, NoReference


class ScreenshotComparisonError(XrayError):
    """A comparison outcome other than ``Match``, expressed as an error.

    Use :meth:`from_outcome` to get the subclass matching the outcome.
    """

    def __init__(self, outcome: ComparisonOutcome, message: str, error_code: str, **context) -> None:
        if isinstance(outcome, Match):
            raise ValueError("A matching comparison is not an error")
        super().__init__(message, error_code=error_code, context=context)
        self.outcome = outcome

    @staticmethod
    def from_outcome(outcome: ComparisonOutcome) -> ScreenshotComparisonError:
        """Wrap a failed comparison outcome.

        Args:
            outcome: ``NoReference`` or ``Mismatch``

        Returns:
            The matching error subclass

        Raises:
            ValueError: If the outcome is ``Match``
            TypeError: If the outcome is not a known variant
        """
        if isinstance(outcome, NoReference):
            return NoReferenceScreenshot(outcome)
        if isinstance(outcome, Mismatch):
            return ScreenshotMismatch(outcome)
        if isinstance(outcome, Match):
            raise ValueError("A matching comparison is not an error")
        raise TypeError(f"Unknown comparison outcome: {outcome!r}")


class NoReferenceScreenshot(ScreenshotComparisonError):
    """No baseline exists (or it was unreadable) for the captured screenshot."""

    def __init__(self, outcome: NoReference) -> None:
        super().__init__(
            outcome,
            "No reference screenshot found.",
            error_code="NO_REFERENCE",
            captured_size=outcome.captured.size,
        )


class ScreenshotMismatch(ScreenshotComparisonError):
    """The captured screenshot differs from the baseline."""

    def __init__(self, outcome: Mismatch) -> None:
        differing = count_differing_pixels(outcome.actual, outcome.expected)
        actual_size = outcome.actual.size
        expected_size = outcome.expected.size
        message = "Actual screenshot did not match expected screenshot."
        details = f" ({differing} differing pixels"
        if actual_size != expected_size:
            details += (
                f"; actual is {actual_size[0]}x{actual_size[1]}, "
                f"expected is {expected_size[0]}x{expected_size[1]}"
            )
        message += details + ")"
        super().__init__(
            outcome,
            message,
            error_code="SCREENSHOT_MISMATCH",
            differing_pixels=differing,
            actual_size=actual_size,
            expected_size=expected_size,
        )
        self.differing_pixels = differing


class ScreenshotAssertionError(AssertionError):
    """Raised by ``assert_screenshot_test`` when the test did not pass.

    Attributes:
        error: The structured error the test failed with
        superseded: The comparison error replaced by ``error``, if persisting
            artifacts failed
    """

    def __init__(self, error: XrayError, superseded: XrayError | None = None) -> None:
        message = str(error)
        if superseded is not None and superseded is not error:
            message += f"\nwhile writing artifacts for: {superseded}"
        super().__init__(message)
        self.error = error
        self.superseded = superseded
