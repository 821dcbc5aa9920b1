"""Logger construction.

Nothing here touches the root logger: each caller builds (or is handed) a
named logger and passes it to the stages explicitly.
"""

from __future__ import annotations

import logging
import sys

from plain.config import settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(level: str | int | None) -> int:
    """Turn *level* into a logging level number, falling back to ``WARNING``.

    Unknown names (``"verbose"``) and ``None`` both fall back.
    """
    if isinstance(level, int):
        return level
    if level is None:
        return logging.WARNING
    number = logging.getLevelName(level.strip().upper())
    return number if isinstance(number, int) else logging.WARNING


def get_logger(name: str = "plain", level: str | int | None = None) -> logging.Logger:
    """Return the logger *name* with a single stderr handler attached.

    Calling it twice for the same name does not stack handlers.  *level*
    defaults to ``settings.log_level``.
    """
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level if level is not None else settings.log_level))
    logger.propagate = False
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger
