"""Logger hierarchy and handler setup for the readmegen CLI and service."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "readmegen"

CONSOLE_FORMAT = "[readmegen] %(levelname)s %(message)s"
# Verbose runs name the pipeline stage that logged each line.
VERBOSE_CONSOLE_FORMAT = "[readmegen] %(levelname)s %(stage)s: %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class _StageFilter(logging.Filter):
    """Adds ``stage``: the logger name relative to the readmegen root."""

    def filter(self, record: logging.LogRecord) -> bool:
        prefix = f"{LOGGER_NAME}."
        record.stage = record.name[len(prefix):] if record.name.startswith(prefix) else record.name
        return True


def get_logger(stage: str | None = None) -> logging.Logger:
    """Return the logger for a pipeline stage, e.g. ``get_logger("tree_scanner")``."""
    return logging.getLogger(f"{LOGGER_NAME}.{stage}" if stage else LOGGER_NAME)


def reset_logging() -> None:
    """Detach and close every handler installed by :func:`configure_logging`."""
    root = logging.getLogger(LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(logging.NOTSET)
    root.propagate = True


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Route readmegen logs to stderr and, optionally, to ``log_file``.

    Console output always goes to stderr so ``--dry-run`` can print the README
    on stdout untouched. Calling this again replaces the previous handlers.
    """
    reset_logging()
    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger(LOGGER_NAME)
    root.setLevel(level)
    root.propagate = False

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    if verbose:
        console.addFilter(_StageFilter())
        console.setFormatter(logging.Formatter(VERBOSE_CONSOLE_FORMAT))
    else:
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        # The file keeps debug detail even when the console stays at INFO.
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        root.addHandler(file_handler)
        root.setLevel(logging.DEBUG)

    return root


__all__ = [
    "CONSOLE_FORMAT",
    "FILE_FORMAT",
    "LOGGER_NAME",
    "VERBOSE_CONSOLE_FORMAT",
    "configure_logging",
    "get_logger",
    "reset_logging",
]
