"""Logging bootstrap for the command-line tool."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "daisythemes"

_installed_handlers: list[logging.Handler] = []


def configure_logging(
    console: Console,
    *,
    verbose: bool = False,
    log_file: Path | None = None,
) -> logging.Logger:
    """Attach console and optional rotating file handlers to the package logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in _installed_handlers:
        logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    console_handler = RichHandler(console=console, show_path=False, show_time=False)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    _install(logger, console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=512_000,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        _install(logger, file_handler)
    return logger


def _install(logger: logging.Logger, handler: logging.Handler) -> None:
    logger.addHandler(handler)
    _installed_handlers.append(handler)
