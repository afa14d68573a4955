"""Screenshot test orchestration.

A screenshot test runs through the phases

    START -> CAPTURED -> REFERENCE_RESOLVED -> COMPARED -> DONE | FAULTED

capturing the region, loading the reference, comparing both and, when the
comparison fails, persisting diagnostic artifacts. Everything happens
sequentially on the calling thread so artifacts are always written in the same
order.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..base_exceptions import XrayError
from ..comparison.comparator import compare_screenshot_images
from ..comparison.diff_engine import diff_images
from ..comparison_exceptions import ScreenshotAssertionError, ScreenshotComparisonError
from ..hal.config import HALConfig
from ..hal.factory import create_screenshot_captor
from ..hal.implementations.fs_screenshot_io import FsScreenshotIo
from ..hal.interfaces.screenshot_captor import IScreenshotCaptor
from ..hal.interfaces.screenshot_io import IScreenshotIo
from ..hardware_exceptions import CaptureFailed
from ..logging import get_logger
from ..model.image import ScreenshotImage
from ..model.outcome import ComparisonOutcome, Match, Mismatch, NoReference
from ..model.region import Region

logger = get_logger(__name__)


class ScreenshotTestPhase(Enum):
    """Phases of a screenshot test."""

    START = "start"
    CAPTURED = "captured"
    REFERENCE_RESOLVED = "reference_resolved"
    COMPARED = "compared"
    DONE = "done"
    FAULTED = "faulted"


@dataclass(frozen=True)
class ScreenshotTestResult:
    """Result of a screenshot test.

    ``error`` is what the test failed with: the capture failure, the comparison
    failure, or the first I/O failure hit while persisting artifacts. In the
    last case the comparison failure it replaced is kept in
    ``comparison_error``.
    """

    phase: ScreenshotTestPhase
    outcome: ComparisonOutcome | None = None
    error: XrayError | None = None
    comparison_error: ScreenshotComparisonError | None = None
    artifacts_written: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.phase is ScreenshotTestPhase.DONE and self.error is None

    @property
    def failed(self) -> bool:
        return not self.passed

    def raise_for_error(self) -> None:
        """Raise ``error`` if the test did not pass."""
        if self.error is not None:
            raise self.error


class _ArtifactWriter:
    """Runs artifact writes in order, remembering the first failure.

    Writes after a failure are still attempted so that as many artifacts as
    possible end up on disk.
    """

    def __init__(self, log) -> None:
        self.log = log
        self.first_error: XrayError | None = None
        self.written: list[str] = []

    def write(
        self, name: str, write: Callable[[ScreenshotImage], None], image: ScreenshotImage
    ) -> None:
        try:
            write(image)
        except XrayError as e:
            self.log.error("artifact_write_failed", artifact=name, error=str(e))
            if self.first_error is None:
                self.first_error = e
            return
        self.written.append(name)
        self.log.debug("artifact_written", artifact=name, size=image.size)


def _persist_artifacts(
    screenshot_io: IScreenshotIo, outcome: ComparisonOutcome, log
) -> tuple[XrayError | None, tuple[str, ...]]:
    """Write the artifacts for a failed comparison.

    Returns:
        The first I/O error encountered (or None) and the names written
    """
    try:
        screenshot_io.prepare_output()
    except XrayError as e:
        log.error("output_location_unavailable", error=str(e))
        return e, ()

    writer = _ArtifactWriter(log)
    if isinstance(outcome, NoReference):
        writer.write("actual", screenshot_io.write_actual, outcome.captured)
    elif isinstance(outcome, Mismatch):
        writer.write("expected", screenshot_io.write_expected, outcome.expected)
        writer.write("actual", screenshot_io.write_actual, outcome.actual)
        writer.write("diff", screenshot_io.write_diff, diff_images(outcome.actual, outcome.expected))
    else:
        raise TypeError(f"No artifacts defined for outcome {outcome!r}")

    return writer.first_error, tuple(writer.written)


def screenshot_test(
    screenshot_io: IScreenshotIo,
    screenshot_captor: IScreenshotCaptor,
    x: int,
    y: int,
    width: int,
    height: int,
) -> ScreenshotTestResult:
    """Test the rendered region against its reference screenshot.

    The screenshot is taken with ``screenshot_captor.capture_image`` and the
    reference is loaded with ``screenshot_io.load_reference``. If the reference
    is missing, only the actual screenshot is written. If the images differ, the
    expected, actual and diff images are written, in that order.

    Failures are returned in the result, never raised.

    Args:
        screenshot_io: Reference storage and artifact sink for this test
        screenshot_captor: Capture backend
        x: X coordinate of the region's top-left corner
        y: Y coordinate of the region's top-left corner
        width: Region width in pixels
        height: Region height in pixels

    Returns:
        ScreenshotTestResult

    Raises:
        ValueError: If width or height is negative
    """
    region = Region(x, y, width, height)
    log = logger.bind(region=region.as_tuple())
    phase = ScreenshotTestPhase.START

    try:
        captured = screenshot_captor.capture_image(*region.as_tuple())
    except CaptureFailed as e:
        log.error("capture_failed", phase=phase.value, error=str(e))
        return ScreenshotTestResult(ScreenshotTestPhase.FAULTED, error=e)
    phase = ScreenshotTestPhase.CAPTURED
    log.debug("screenshot_captured", phase=phase.value, size=captured.size)

    # Zero-area regions match trivially; PNG cannot store an empty reference
    if region.is_empty and captured.is_empty:
        log.info("screenshot_test_passed", phase=ScreenshotTestPhase.DONE.value, empty=True)
        return ScreenshotTestResult(ScreenshotTestPhase.DONE, outcome=Match())

    reference: ScreenshotImage | None
    try:
        reference = screenshot_io.load_reference()
    except XrayError as e:
        log.warning("reference_missing", error=str(e))
        reference = None
    phase = ScreenshotTestPhase.REFERENCE_RESOLVED

    if reference is None:
        outcome: ComparisonOutcome = NoReference(captured)
    else:
        outcome = compare_screenshot_images(reference, captured)
        phase = ScreenshotTestPhase.COMPARED

    if isinstance(outcome, Match):
        log.info("screenshot_test_passed", phase=ScreenshotTestPhase.DONE.value)
        return ScreenshotTestResult(ScreenshotTestPhase.DONE, outcome=outcome)

    comparison_error = ScreenshotComparisonError.from_outcome(outcome)
    log.warning(
        "screenshot_mismatch" if isinstance(outcome, Mismatch) else "screenshot_unverified",
        phase=phase.value,
        error=str(comparison_error),
    )

    io_error, written = _persist_artifacts(screenshot_io, outcome, log)
    log.info("artifacts_persisted", artifacts=list(written), failed=io_error is not None)

    return ScreenshotTestResult(
        ScreenshotTestPhase.FAULTED,
        outcome=outcome,
        error=io_error or comparison_error,
        comparison_error=comparison_error,
        artifacts_written=written,
    )


def assert_screenshot_test(
    screenshot_io: IScreenshotIo,
    screenshot_captor: IScreenshotCaptor,
    x: int,
    y: int,
    width: int,
    height: int,
) -> None:
    """Test the rendered region against its reference and fail loudly.

    Same as :func:`screenshot_test`, but raises instead of returning a result.

    Raises:
        ScreenshotAssertionError: If the screenshot could not be taken, has no
            reference, does not match, or artifacts could not be written
    """
    result = screenshot_test(screenshot_io, screenshot_captor, x, y, width, height)
    if result.error is not None:
        raise ScreenshotAssertionError(result.error, result.comparison_error) from result.error


def default_screenshot_test(
    test_name: str,
    x: int,
    y: int,
    width: int,
    height: int,
    *,
    hal_config: HALConfig | None = None,
) -> None:
    """Screenshot the screen region and assert it matches ``references/<test_name>.png``.

    Uses :meth:`FsScreenshotIo.default` for storage and the captor selected by
    the HAL configuration (MSS unless ``XRAY_CAPTURE_BACKEND`` says otherwise).
    On failure these files are written:

    * ``test_output/<test_name>/actual.png``
    * ``test_output/<test_name>/expected.png``
    * ``test_output/<test_name>/diff.png``

    To customise any of this, pass your own ``IScreenshotIo`` and
    ``IScreenshotCaptor`` to :func:`assert_screenshot_test`.

    Raises:
        ScreenshotAssertionError: If the test fails
    """
    screenshot_io = FsScreenshotIo.default(test_name)
    screenshot_captor = create_screenshot_captor(hal_config)
    assert_screenshot_test(screenshot_io, screenshot_captor, x, y, width, height)
