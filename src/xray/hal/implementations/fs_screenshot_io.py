"""Filesystem-backed reference storage and artifact persistence."""

from __future__ import annotations

from pathlib import Path

from ...config import get_settings
from ...io_exceptions import FailedLoadingReference, FailedWritingArtifact, OutputLocationUnavailable
from ...logging import get_logger
from ...model.image import ScreenshotImage
from ..interfaces.screenshot_io import IScreenshotIo

logger = get_logger(__name__)


class FsScreenshotIo(IScreenshotIo):
    """Retrieves reference screenshots and stores debugging screenshots on disk.

    All images are PNG. The reference for a test is read from
    ``<references_path>/<test_name>.png``. On failure, artifacts are written to
    ``<output_path>/<test_name>/``:

    * ``actual.png``: the screenshot taken during the test
    * ``expected.png``: the reference it was compared against
    * ``diff.png``: the pixels of the screenshot that did not match

    ``test_name`` may contain slashes to use subdirectories. For a references
    path ``tests/reference_images`` and a test name ``basics/menu`` the
    reference is ``tests/reference_images/basics/menu.png``.
    """

    def __init__(
        self,
        test_name: str,
        references_path: str | Path = "references",
        output_path: str | Path = "test_output",
    ) -> None:
        """Initialize filesystem storage.

        Args:
            test_name: Test identity, may contain ``/``
            references_path: Root directory of reference images
            output_path: Root directory for artifacts
        """
        self.test_name = test_name
        self.references_path = Path(references_path)
        self.output_path = Path(output_path)

    @classmethod
    def default(cls, test_name: str) -> FsScreenshotIo:
        """Create storage rooted at the configured reference and output paths.

        Defaults to ``references/`` and ``test_output/`` relative to the working
        directory; override with ``XRAY_REFERENCES_PATH`` and ``XRAY_OUTPUT_PATH``.
        """
        settings = get_settings()
        return cls(test_name, settings.references_path, settings.output_path)

    @property
    def reference_file(self) -> Path:
        return self.references_path / f"{self.test_name}.png"

    @property
    def output_dir(self) -> Path:
        return self.output_path / self.test_name

    def prepare_output(self) -> None:
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise OutputLocationUnavailable(str(self.output_path)) from e

    def load_reference(self) -> ScreenshotImage:
        path = self.reference_file
        try:
            image = ScreenshotImage.decode_png(path.read_bytes())
        except Exception as e:
            logger.debug("reference_load_failed", path=str(path), error=str(e))
            raise FailedLoadingReference(str(e)) from e
        logger.debug("reference_loaded", path=str(path), size=image.size)
        return image

    def write_actual(self, image: ScreenshotImage) -> None:
        self._write_image("actual.png", image)

    def write_expected(self, image: ScreenshotImage) -> None:
        self._write_image("expected.png", image)

    def write_diff(self, image: ScreenshotImage) -> None:
        self._write_image("diff.png", image)

    def _write_image(self, name: str, image: ScreenshotImage) -> None:
        filename = self.output_dir / name
        try:
            handle = filename.open("wb")
        except OSError as e:
            raise FailedWritingArtifact(str(filename), "Could not open file for writing") from e
        with handle:
            try:
                image.to_pil().save(handle, format="PNG")
            except Exception as e:
                raise FailedWritingArtifact(str(filename), str(e)) from e
        logger.debug("artifact_written", path=str(filename))

    def __repr__(self) -> str:
        return (
            f"FsScreenshotIo(test_name={self.test_name!r}, "
            f"references_path={str(self.references_path)!r}, "
            f"output_path={str(self.output_path)!r})"
        )
