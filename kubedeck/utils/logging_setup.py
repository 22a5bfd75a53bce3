"""File logging for the TUI.

The terminal belongs to Textual, so records go to a file instead of stderr.
"""

from __future__ import annotations

import logging
import os

from kubedeck.constants.defaults import LOG_FILE_DEFAULT, LOG_LEVEL_ENV_VAR

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def resolve_log_level(value: str | None = None) -> int:
    """Map a level name to a logging level, defaulting to INFO."""
    if value is None:
        value = os.environ.get(LOG_LEVEL_ENV_VAR, "")
    return _LEVELS.get(value.strip().upper(), logging.INFO)


def setup_logging(log_file: str | None = None, level: int | None = None) -> None:
    """Send application logs to ``log_file`` (``/tmp/kubedeck.log`` by default)."""
    logging.basicConfig(
        filename=log_file or LOG_FILE_DEFAULT,
        level=level if level is not None else resolve_log_level(),
        format=LOG_FORMAT,
        force=True,
    )
    logging.getLogger(__name__).info(
        "Logging at %s", logging.getLevelName(logging.getLogger().level)
    )
