from __future__ import annotations

import logging
import os

from rich.logging import RichHandler

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def resolve_level(level: str | None = None) -> str:
    """Pick the log level: argument, then ``CHRONOSTATS_LOG_LEVEL``, then INFO.

    Unknown names fall back to INFO.
    """
    if level is None:
        level = os.environ.get("CHRONOSTATS_LOG_LEVEL", "INFO")

    level = str(level).upper().strip()
    if level not in _LEVELS:
        level = "INFO"
    return level


def setup_logging(level: str | None = None) -> None:
    """Configure console logging for scripts that use chronostats.

    Uses standard `logging` + RichHandler. Safe to call multiple times.
    The library itself only creates module loggers and never calls this.
    """
    level = resolve_level(level)

    # Avoid duplicated handlers on re-init.
    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%H:%M:%S]",
        handlers=[
            RichHandler(
                rich_tracebacks=True,
                show_path=False,
                show_time=True,
            )
        ],
    )
