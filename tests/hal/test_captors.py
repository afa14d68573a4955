"""Tests for the screen capture backends, with the platform libraries mocked."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from PIL import Image as PILImage

from xray.hal.config import HALConfig
from xray.hal.implementations import mss_captor, pillow_captor
from xray.hal.implementations.mss_captor import MSSScreenshotCaptor
from xray.hal.implementations.pillow_captor import PillowScreenshotCaptor
from xray.hardware_exceptions import CaptureFailed

MONITORS = [
    {"left": -1920, "top": 0, "width": 3840, "height": 1080},  # Virtual desktop
    {"left": 0, "top": 0, "width": 1920, "height": 1080},  # Primary
    {"left": -1920, "top": 0, "width": 1920, "height": 1080},  # Secondary (left)
]


def _grab_result(width: int, height: int, bgra_pixel: bytes) -> SimpleNamespace:
    return SimpleNamespace(width=width, height=height, bgra=bgra_pixel * (width * height))


@pytest.fixture
def fake_sct(monkeypatch) -> MagicMock:
    """Replace mss.mss() with a mock screenshot handle."""
    sct = MagicMock()
    sct.monitors = MONITORS
    monkeypatch.setattr(mss_captor.mss, "mss", lambda: sct)
    return sct


class TestMSSScreenshotCaptor:
    """Test MSSScreenshotCaptor."""

    def test_converts_bgra_to_opaque_rgba(self, fake_sct: MagicMock) -> None:
        """Test channel order conversion; screen pixels are always opaque."""
        fake_sct.grab.return_value = _grab_result(2, 1, bytes([10, 20, 30, 0]))
        image = MSSScreenshotCaptor(HALConfig(capture_monitor=None)).capture_image(5, 6, 2, 1)

        fake_sct.grab.assert_called_once_with({"left": 5, "top": 6, "width": 2, "height": 1})
        assert image.size == (2, 1)
        assert image.get_pixel(1, 0) == (30, 20, 10, 255)

    def test_monitor_relative_coordinates(self, fake_sct: MagicMock) -> None:
        """Test that region coordinates are offset by the configured monitor."""
        fake_sct.grab.return_value = _grab_result(1, 1, bytes(4))
        MSSScreenshotCaptor(HALConfig(capture_monitor=1)).capture_image(5, 6, 1, 1)
        fake_sct.grab.assert_called_once_with({"left": -1915, "top": 6, "width": 1, "height": 1})

    def test_invalid_monitor(self, fake_sct: MagicMock) -> None:
        with pytest.raises(CaptureFailed) as exc_info:
            MSSScreenshotCaptor(HALConfig(capture_monitor=5)).capture_image(0, 0, 1, 1)
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_backend_error(self, fake_sct: MagicMock) -> None:
        """Test that backend errors become CaptureFailed without retrying."""
        fake_sct.grab.side_effect = RuntimeError("XGetImage() failed")
        with pytest.raises(CaptureFailed) as exc_info:
            MSSScreenshotCaptor(HALConfig(capture_monitor=None)).capture_image(0, 0, 4, 4)
        assert exc_info.value.reason == "XGetImage() failed"
        assert exc_info.value.region == (0, 0, 4, 4)
        assert fake_sct.grab.call_count == 1

    def test_wrong_size_from_backend(self, fake_sct: MagicMock) -> None:
        fake_sct.grab.return_value = _grab_result(1, 1, bytes(4))
        with pytest.raises(CaptureFailed):
            MSSScreenshotCaptor(HALConfig(capture_monitor=None)).capture_image(0, 0, 2, 2)

    def test_zero_area_skips_backend(self, fake_sct: MagicMock) -> None:
        image = MSSScreenshotCaptor(HALConfig(capture_monitor=None)).capture_image(0, 0, 0, 7)
        assert image.size == (0, 7)
        fake_sct.grab.assert_not_called()

    def test_close(self, fake_sct: MagicMock) -> None:
        fake_sct.grab.return_value = _grab_result(1, 1, bytes(4))
        captor = MSSScreenshotCaptor(HALConfig(capture_monitor=None))
        captor.capture_image(0, 0, 1, 1)
        captor.close()
        fake_sct.close.assert_called_once()


class TestPillowScreenshotCaptor:
    """Test PillowScreenshotCaptor."""

    def test_grabs_bounding_box(self, monkeypatch) -> None:
        calls = []

        def fake_grab(bbox=None, all_screens=False):
            calls.append(bbox)
            return PILImage.new("RGBA", (bbox[2] - bbox[0], bbox[3] - bbox[1]), (1, 2, 3, 0))

        monkeypatch.setattr(pillow_captor.ImageGrab, "grab", fake_grab)
        image = PillowScreenshotCaptor().capture_image(10, 20, 3, 2)

        assert calls == [(10, 20, 13, 22)]
        assert image.size == (3, 2)
        assert image.get_pixel(2, 1) == (1, 2, 3, 255)

    def test_backend_error(self, monkeypatch) -> None:
        def failing_grab(bbox=None, all_screens=False):
            raise OSError("X connection failed")

        monkeypatch.setattr(pillow_captor.ImageGrab, "grab", failing_grab)
        with pytest.raises(CaptureFailed) as exc_info:
            PillowScreenshotCaptor().capture_image(0, 0, 1, 1)
        assert exc_info.value.reason == "X connection failed"


class TestCaptureLogging:
    """Test the capture events controlled by HALConfig.debug_mode."""

    def test_debug_mode_logs_timing(self, fake_sct: MagicMock, monkeypatch) -> None:
        logger = MagicMock()
        monkeypatch.setattr(mss_captor, "logger", logger)
        fake_sct.grab.return_value = _grab_result(1, 1, bytes(4))

        config = HALConfig(capture_monitor=None, debug_mode=True)
        MSSScreenshotCaptor(config).capture_image(3, 4, 1, 1)

        logger.info.assert_called_once()
        args, kwargs = logger.info.call_args
        assert args == ("region_captured",)
        assert kwargs["region"] == (3, 4, 1, 1)
        assert kwargs["backend"] == "mss"
        assert kwargs["elapsed_ms"] >= 0

    def test_quiet_without_debug_mode(self, monkeypatch) -> None:
        logger = MagicMock()
        monkeypatch.setattr(pillow_captor, "logger", logger)
        monkeypatch.setattr(
            pillow_captor.ImageGrab,
            "grab",
            lambda bbox=None, all_screens=False: PILImage.new("RGB", (1, 1)),
        )

        PillowScreenshotCaptor(HALConfig(debug_mode=False)).capture_image(0, 0, 1, 1)

        logger.info.assert_not_called()
        logger.debug.assert_called_once_with(
            "region_captured", region=(0, 0, 1, 1), backend="pillow"
        )
