"""Logging utilities (simple wrapper)."""

from __future__ import annotations
import logging
import os
from typing import Optional

LEVEL_ENV = "YT_SEARCH_LOG_LEVEL"

_LOGGER: Optional[logging.Logger] = None
_APPLIED: Optional[str] = None


def parse_level(name: object) -> Optional[int]:
    """Numeric level for a name like ``"debug"``, or None if logging has no such level."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else None


def get_logger(level: str | None = None) -> logging.Logger:
    global _LOGGER, _APPLIED
    if _LOGGER is None:
        logger = logging.getLogger("yt_search")
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
        _LOGGER = logger
    # Environment wins over the configured level
    wanted = os.environ.get(LEVEL_ENV) or level
    if wanted and wanted != _APPLIED:
        _APPLIED = wanted
        numeric = parse_level(wanted)
        if numeric is None:
            _LOGGER.setLevel(logging.WARNING)
            _LOGGER.warning("Unknown log level %r, using WARNING", wanted)
        else:
            _LOGGER.setLevel(numeric)
    return _LOGGER
