"""Capture event logging shared by the screen capture backends."""

import time
from typing import Any

from ..config import HALConfig


def log_capture(
    logger: Any,
    config: HALConfig,
    region: tuple[int, int, int, int],
    backend: str,
    started: float,
) -> None:
    """Log a completed capture.

    With ``HALConfig.debug_mode`` the event is raised to info level and carries
    the capture duration.

    Args:
        logger: Logger of the calling backend module
        config: HAL configuration of the captor
        region: Captured region as ``(x, y, width, height)``
        backend: Backend name
        started: ``time.perf_counter()`` value taken before the grab
    """
    if config.debug_mode:
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        logger.info("region_captured", region=region, backend=backend, elapsed_ms=elapsed_ms)
    else:
        logger.debug("region_captured", region=region, backend=backend)
