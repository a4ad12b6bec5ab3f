"""Process-wide logging configuration.

Log records go to stderr so they never mix with command output on
stdout (which may be JSON consumed by another program).
"""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV: str = "MCLI_LOG_LEVEL"

_LEVELS: dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def resolve_level(level: str | int | None = None) -> int:
    """Return a numeric log level from *level* or ``MCLI_LOG_LEVEL``.

    Unknown names fall back to ``WARNING``.
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        return _LEVELS.get(level.upper(), logging.WARNING)
    return level


def setup_logging(level: str | int | None = None) -> None:
    """Configure application logging with a consistent formatter."""
    logging.basicConfig(
        level=resolve_level(level),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    )
