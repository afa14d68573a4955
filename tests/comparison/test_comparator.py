"""Tests for exact screenshot comparison."""

from conftest import RED, image_from_pixels
from xray.comparison.comparator import compare_screenshot_images
from xray.model.image import ScreenshotImage
from xray.model.outcome import Match, Mismatch


class TestCompareScreenshotImages:
    """Test compare_screenshot_images."""

    def test_identical_images_match(self, rgbw) -> None:
        """Test that byte-identical images match."""
        copy = ScreenshotImage.from_bytes(2, 2, bytes(rgbw.pixels))
        assert compare_screenshot_images(rgbw, copy) == Match()

    def test_mismatch_carries_both_images(self, rgbw, rbgw) -> None:
        """Test that a mismatch keeps actual and reference in the right slots."""
        outcome = compare_screenshot_images(rgbw, rbgw)
        assert isinstance(outcome, Mismatch)
        assert outcome.actual is rbgw
        assert outcome.expected is rgbw

    def test_single_byte_difference(self) -> None:
        """Test that there is no tolerance, even for one alpha step."""
        reference = ScreenshotImage.new(10, 10, RED)
        pixels = [RED] * 100
        pixels[99] = (255, 0, 0, 254)
        actual = image_from_pixels(10, 10, pixels)
        assert isinstance(compare_screenshot_images(reference, actual), Mismatch)

    def test_same_bytes_different_dimensions(self) -> None:
        """Test that a reshaped buffer is a mismatch."""
        data = bytes(range(8))
        outcome = compare_screenshot_images(ScreenshotImage(2, 1, data), ScreenshotImage(1, 2, data))
        assert isinstance(outcome, Mismatch)

    def test_empty_images(self) -> None:
        """Test degenerate images: equal sizes match, different sizes do not."""
        assert compare_screenshot_images(ScreenshotImage.new(0, 0), ScreenshotImage.new(0, 0)) == Match()
        assert isinstance(
            compare_screenshot_images(ScreenshotImage.new(0, 3), ScreenshotImage.new(3, 0)), Mismatch
        )
