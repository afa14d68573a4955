"""Structured logging configuration for xray using structlog.

xray never calls ``structlog.configure``. Its loggers are wrapped with their
own processor chain and write to the ``xray`` stdlib logger, so the host
application's structlog and logging setup stay as they are.
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, cast

import structlog

from ..config import get_settings

PACKAGE_LOGGER = "xray"

# Shared by every xray logger; setup_logging swaps its contents in place
_processors: list[Any] = []


def _build_processors(structured: bool, colorize: bool) -> list[Any]:
    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if structured:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colorize))

    return processors


def setup_logging(
    level: str = "WARNING",
    log_file: Path | None = None,
    structured: bool = True,
    console: bool = True,
) -> None:
    """Configure structured logging for xray.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        structured: Use JSON structured output, otherwise colored console output
        console: Enable console output (overridden by XRAY_DISABLE_CONSOLE_LOGGING env var)
    """
    global _logging_initialized

    if os.getenv("XRAY_DISABLE_CONSOLE_LOGGING") == "1":
        console = False
        log_file = None

    handlers: list[logging.Handler] = []

    if console:
        # stderr, stdout belongs to the test runner
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    if not handlers:
        handlers.append(logging.NullHandler())
        level = "CRITICAL"

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper()))
    package_logger.propagate = False

    _processors[:] = _build_processors(structured, colorize=console and not structured)
    _logging_initialized = True


_logging_initialized = False


def _ensure_logging_initialized() -> None:
    """Configure xray logging from settings unless setup_logging already ran."""
    if _logging_initialized:
        return

    if os.getenv("XRAY_DISABLE_CONSOLE_LOGGING") == "1":
        setup_logging(console=False)
        return

    try:
        settings = get_settings()
        log_file = None
        if settings.log_path is not None:
            log_file = settings.log_path / f"xray_{datetime.now().strftime('%Y%m%d')}.log"
        setup_logging(
            level="DEBUG" if settings.debug_mode else settings.log_level,
            log_file=log_file,
            structured=not settings.debug_mode,
        )
    except (ImportError, AttributeError, OSError, ValueError):
        # Settings or log path unusable: fall back to plain console logging
        setup_logging(level="INFO", structured=False)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    The first call configures the ``xray`` stdlib logger from settings.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    _ensure_logging_initialized()
    return cast(
        structlog.stdlib.BoundLogger,
        structlog.wrap_logger(
            logging.getLogger(name),
            processors=_processors,
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            cache_logger_on_first_use=False,
        ),
    )
