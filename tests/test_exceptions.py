"""Tests for the xray error hierarchy and its messages."""

import pytest

from xray.base_exceptions import XrayError, XrayException
from xray.comparison_exceptions import (
    NoReferenceScreenshot,
    ScreenshotAssertionError,
    ScreenshotComparisonError,
    ScreenshotMismatch,
)
from xray.hardware_exceptions import CaptureFailed
from xray.io_exceptions import (
    FailedLoadingReference,
    FailedWritingArtifact,
    OutputLocationUnavailable,
    ScreenshotIoError,
)
from xray.model.image import ScreenshotImage
from xray.model.outcome import Match, Mismatch, NoReference


class TestMessages:
    """Test human-readable rendering of each error."""

    def test_output_location_unavailable(self) -> None:
        error = OutputLocationUnavailable("test_output")
        assert error.message == "Could not write to output location: test_output"
        assert str(error) == "[OUTPUT_LOCATION_UNAVAILABLE] Could not write to output location: test_output"
        assert error.location == "test_output"

    def test_failed_writing_artifact(self) -> None:
        error = FailedWritingArtifact("out/diff.png", "disk full")
        assert error.message == "Could not write screenshot out/diff.png:\ndisk full"
        assert error.context == {"name": "out/diff.png", "reason": "disk full"}

    def test_failed_loading_reference(self) -> None:
        error = FailedLoadingReference()
        assert error.message == "Reference image could not be loaded or parsed"
        assert error.error_code == "REFERENCE_LOAD_FAILED"

    def test_capture_failed(self) -> None:
        error = CaptureFailed("GL_INVALID_OPERATION", region=(0, 0, 10, 10))
        assert error.message == "Could not take screenshot."
        assert error.context["reason"] == "GL_INVALID_OPERATION"
        assert error.region == (0, 0, 10, 10)

    def test_no_reference(self) -> None:
        error = NoReferenceScreenshot(NoReference(ScreenshotImage.new(3, 2)))
        assert error.message == "No reference screenshot found."
        assert error.context["captured_size"] == (3, 2)

    def test_mismatch_reports_pixel_count(self, rbgw, rgbw) -> None:
        error = ScreenshotMismatch(Mismatch(rbgw, rgbw))
        assert error.message.startswith("Actual screenshot did not match expected screenshot.")
        assert "2 differing pixels" in error.message
        assert error.differing_pixels == 2

    def test_mismatch_reports_size_difference(self) -> None:
        error = ScreenshotMismatch(Mismatch(ScreenshotImage.new(4, 4), ScreenshotImage.new(2, 3)))
        assert "actual is 4x4, expected is 2x3" in error.message


class TestHierarchy:
    """Test error families."""

    @pytest.mark.parametrize(
        "error",
        [
            OutputLocationUnavailable("x"),
            FailedWritingArtifact("x", "y"),
            FailedLoadingReference(),
        ],
    )
    def test_io_family(self, error: XrayError) -> None:
        assert isinstance(error, ScreenshotIoError)
        assert isinstance(error, XrayError)
        assert isinstance(error, XrayException)

    def test_capture_family(self) -> None:
        assert isinstance(CaptureFailed(), XrayError)
        assert not isinstance(CaptureFailed(), ScreenshotIoError)


class TestFromOutcome:
    """Test wrapping comparison outcomes as errors."""

    def test_no_reference(self) -> None:
        outcome = NoReference(ScreenshotImage.new(1, 1))
        error = ScreenshotComparisonError.from_outcome(outcome)
        assert isinstance(error, NoReferenceScreenshot)
        assert error.outcome is outcome

    def test_mismatch(self, rgbw, rbgw) -> None:
        outcome = Mismatch(rbgw, rgbw)
        error = ScreenshotComparisonError.from_outcome(outcome)
        assert isinstance(error, ScreenshotMismatch)
        assert error.outcome is outcome

    def test_match_is_not_an_error(self) -> None:
        with pytest.raises(ValueError):
            ScreenshotComparisonError.from_outcome(Match())

    def test_unknown_outcome(self) -> None:
        with pytest.raises(TypeError):
            ScreenshotComparisonError.from_outcome(object())  # type: ignore[arg-type]


class TestScreenshotAssertionError:
    """Test the error raised by the asserting wrapper."""

    def test_is_assertion_error(self) -> None:
        error = ScreenshotAssertionError(CaptureFailed())
        assert isinstance(error, AssertionError)
        assert str(error) == "[CAPTURE_FAILED] Could not take screenshot."

    def test_mentions_superseded_comparison_error(self) -> None:
        comparison_error = NoReferenceScreenshot(NoReference(ScreenshotImage.new(1, 1)))
        error = ScreenshotAssertionError(OutputLocationUnavailable("out"), comparison_error)
        assert "Could not write to output location: out" in str(error)
        assert "No reference screenshot found." in str(error)
        assert error.superseded is comparison_error
