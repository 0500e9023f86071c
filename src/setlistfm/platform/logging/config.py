"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Configure logging defaults and expose the shared library logger.
Why: Separate handler formatting from setup so configuration stays concise.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console

from setlistfm.config.paths import default_log_file

from .handlers import RequestRichHandler


DEFAULT_LOG_FILE: Final[Path] = default_log_file()
LOGGER_NAME: Final[str] = "setlistfm"


def _clear_handlers(target: logging.Logger) -> None:
    for handler in list(target.handlers):
        handler.close()
    target.handlers.clear()


def reset_logger() -> logging.Logger:
    """Return the library logger to its import-time state.

    Only a ``NullHandler`` is attached and records propagate, so the host
    application's logging configuration decides where they go.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _clear_handlers(logger)
    logger.addHandler(logging.NullHandler())
    return logger


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
    *,
    console: bool = True,
) -> logging.Logger:
    """Set up and configure the library logger.

    Called explicitly by applications; importing the package only installs a
    ``NullHandler`` (see :func:`reset_logger`). With ``console`` the logger
    owns its output and stops propagating; without it, records still reach
    the host application's handlers.

    Args:
        log_file: Path to the log file. If None, no file handler is attached.
        console_level: Logging level for console output. Defaults to WARNING.
        file_level: Logging level for file output. Defaults to DEBUG.
        console: Attach the Rich console handler on stderr.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = not console
    _clear_handlers(logger)

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    if console:
        console_handler = RequestRichHandler(console=Console(stderr=True, soft_wrap=True))
        console_handler.setLevel(console_level)
        logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


logger: Final[logging.Logger] = reset_logger()


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "reset_logger", "setup_logger", "logger"]
