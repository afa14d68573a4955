"""Reference storage and artifact persistence interface definition."""

from abc import ABC, abstractmethod

from ...model.image import ScreenshotImage


class IScreenshotIo(ABC):
    """Loads reference images and stores artifacts of failed tests.

    An instance is scoped to a single test identity. Run concurrent tests with
    separate instances so artifacts of one test never overwrite another's.
    """

    @abstractmethod
    def prepare_output(self) -> None:
        """Make sure artifacts can be written, e.g. by creating directories.

        Must be safe to call more than once.

        Raises:
            OutputLocationUnavailable: If the destination cannot be prepared
        """
        pass

    @abstractmethod
    def load_reference(self) -> ScreenshotImage:
        """Load the reference image for this test.

        Raises:
            FailedLoadingReference: If no reference exists or it cannot be decoded
        """
        pass

    @abstractmethod
    def write_actual(self, image: ScreenshotImage) -> None:
        """Write the screenshot taken during the test.

        Raises:
            FailedWritingArtifact: If the image could not be written
        """
        pass

    @abstractmethod
    def write_expected(self, image: ScreenshotImage) -> None:
        """Write the reference the screenshot was compared against.

        Raises:
            FailedWritingArtifact: If the image could not be written
        """
        pass

    @abstractmethod
    def write_diff(self, image: ScreenshotImage) -> None:
        """Write the image holding only the pixels that did not match.

        Raises:
            FailedWritingArtifact: If the image could not be written
        """
        pass
