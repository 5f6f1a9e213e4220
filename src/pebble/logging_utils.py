"""Runtime logging helpers."""

from __future__ import annotations

import sys
from logging import Handler
from pathlib import Path
from typing import Literal

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

from pebble.errors import ConfigurationError

LogProfile = Literal["default", "console"]

_DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED: tuple[LogProfile, str, Path | None] | None = None


def _build_console_handler() -> Handler:
    return RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def configure_logging(level: str = "WARNING", *, log_file: Path | None = None, profile: LogProfile = "default") -> None:
    """Configure process-level logging once."""

    global _CONFIGURED
    key = (profile, level, log_file)
    if key == _CONFIGURED:
        return

    logger.remove()
    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            logger.add(log_file, level=level, format=_DEFAULT_FORMAT, backtrace=False, diagnose=False)
        except OSError as exc:
            raise ConfigurationError(f"cannot open log file {log_file}: {exc}") from exc
    elif profile == "console":
        logger.add(
            _build_console_handler(),
            level=level,
            format="{message}",
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(sys.stderr, level=level, format=_DEFAULT_FORMAT, backtrace=False, diagnose=False)
    _CONFIGURED = key
