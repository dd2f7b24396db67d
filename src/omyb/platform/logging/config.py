"""Logger bootstrap for the ``omyb`` logger.

Where: platform/logging/config.py
What: Attach the Rich console handler and an optional rotating log file.
Why: Console output goes to stderr so ``create`` and ``mv`` results stay on stdout.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from omyb.config.paths import env_log_file

from .handlers import WhitePathRichHandler

LOGGER_NAME: Final[str] = "omyb"
LOG_FILE_MAX_BYTES: Final[int] = 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 3
LOG_FILE_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"

DEFAULT_LOG_FILE: Final[Path | None] = env_log_file()


def _file_handler(log_file: Path) -> RotatingFileHandler:
    resolved = log_file.expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        resolved,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(LOG_FILE_FORMAT))
    return handler


def setup_logger(log_file: Path | None = None, console_level: int = logging.INFO) -> logging.Logger:
    """Replace the handlers of the ``omyb`` logger.

    Args:
        log_file: File receiving every record at DEBUG level. Console only when None.
        console_level: Threshold for records shown on stderr.

    Returns:
        logging.Logger: The configured ``omyb`` logger.
    """
    configured = logging.getLogger(LOGGER_NAME)
    configured.setLevel(logging.DEBUG)

    for handler in list(configured.handlers):
        configured.removeHandler(handler)
        handler.close()

    console_handler = WhitePathRichHandler(console=Console(stderr=True, soft_wrap=True))
    console_handler.setLevel(console_level)
    configured.addHandler(console_handler)

    if log_file is not None:
        configured.addHandler(_file_handler(Path(log_file)))

    return configured


logger: Final[logging.Logger] = setup_logger(log_file=DEFAULT_LOG_FILE)


__all__ = ["DEFAULT_LOG_FILE", "LOGGER_NAME", "logger", "setup_logger"]
