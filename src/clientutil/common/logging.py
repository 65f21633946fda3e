"""Root logger setup for bots embedding clientutil."""

from __future__ import annotations

import logging
from typing import Final

LOGGER_NAMESPACE: Final[str] = "clientutil"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT: Final[str] = "%H:%M:%S"


def configure_logging(
    *,
    level: int | str = logging.INFO,
    force: bool = False,
    namespace: str = LOGGER_NAMESPACE,
) -> logging.Logger:
    """Set the library's log level and make sure the root logger has a handler.

    Bots usually configure logging themselves before creating a client, in which
    case ``basicConfig`` leaves their root handlers alone and only ``namespace``
    (the ``clientutil`` package loggers by default) picks up ``level``. Pass
    ``force=True`` to replace the root handlers as well.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT, force=force)
    logger = logging.getLogger(namespace)
    logger.setLevel(level)
    return logger


__all__ = ["DATE_FORMAT", "LOGGER_NAMESPACE", "LOG_FORMAT", "configure_logging"]
