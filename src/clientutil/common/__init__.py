from __future__ import annotations

from .logging import LOGGER_NAMESPACE, configure_logging

__all__ = ["LOGGER_NAMESPACE", "configure_logging"]
