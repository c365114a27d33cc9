"""
Logging configuration for the webweaver command line.

Library modules only create loggers; handlers are installed here.
"""
from __future__ import annotations

import logging
import sys
from typing import TextIO

DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name for terminal output."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, self.COLORS["RESET"])
        reset = self.COLORS["RESET"]
        formatted = super().format(record)
        if record.levelname in formatted:
            formatted = formatted.replace(record.levelname, f"{color}{record.levelname}{reset}", 1)
        return formatted


def resolve_level(level: str | int | None) -> int:
    """Translate a level name such as ``"debug"`` into a logging constant."""
    if isinstance(level, int):
        return level
    if not level:
        return logging.WARNING
    resolved = logging.getLevelName(str(level).upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def setup_logging(level: str | int | None = None, *, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single console handler to the package logger."""
    logger = logging.getLogger("webweaver")
    logger.setLevel(resolve_level(level))

    target = stream if stream is not None else sys.stderr
    for handler in list(logger.handlers):
        if getattr(handler, "_webweaver_console", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(target)
    use_color = hasattr(target, "isatty") and target.isatty()
    formatter_cls = ColoredFormatter if use_color else logging.Formatter
    handler.setFormatter(formatter_cls(DEFAULT_FORMAT, DEFAULT_DATEFMT))
    handler._webweaver_console = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False
    return logger
