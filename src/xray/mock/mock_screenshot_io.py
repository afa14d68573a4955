"""MockScreenshotIo - in-memory reference storage and artifact sink."""

from __future__ import annotations

from ..base_exceptions import XrayError
from ..hal.interfaces.screenshot_io import IScreenshotIo
from ..io_exceptions import FailedLoadingReference
from ..model.image import ScreenshotImage


class MockScreenshotIo(IScreenshotIo):
    """Keeps the reference and written artifacts in memory.

    Every call is appended to ``calls`` in order, so tests can assert exactly
    which operations ran. Written images are kept in ``artifacts`` under the
    names ``actual``, ``expected`` and ``diff``.

    Failures are injected per operation name, e.g.
    ``MockScreenshotIo(ref, failures={"write_expected": FailedWritingArtifact(...)})``.
    """

    def __init__(
        self,
        reference: ScreenshotImage | None = None,
        failures: dict[str, XrayError] | None = None,
    ) -> None:
        self.reference = reference
        self.failures = dict(failures or {})
        self.calls: list[str] = []
        self.artifacts: dict[str, ScreenshotImage] = {}
        self.prepared = False

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        error = self.failures.get(operation)
        if error is not None:
            raise error

    @property
    def write_calls(self) -> list[str]:
        """Write operations in call order."""
        return [call for call in self.calls if call.startswith("write_")]

    def prepare_output(self) -> None:
        self._record("prepare_output")
        self.prepared = True

    def load_reference(self) -> ScreenshotImage:
        self._record("load_reference")
        if self.reference is None:
            raise FailedLoadingReference("no reference stored")
        return self.reference

    def write_actual(self, image: ScreenshotImage) -> None:
        self._record("write_actual")
        self.artifacts["actual"] = image

    def write_expected(self, image: ScreenshotImage) -> None:
        self._record("write_expected")
        self.artifacts["expected"] = image

    def write_diff(self, image: ScreenshotImage) -> None:
        self._record("write_diff")
        self.artifacts["diff"] = image
