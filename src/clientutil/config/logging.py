"""Logging configuration values."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from clientutil.common.logging import configure_logging

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV: Final[str] = "CLIENTUTIL_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level: int = logging.INFO

    @classmethod
    def from_environment(cls) -> LoggingConfig:
        raw = optional_env_var(LOG_LEVEL_ENV)
        if raw is None:
            return cls()
        level = logging.getLevelNamesMapping().get(raw.upper())
        if level is None:
            raise ConfigurationError(f"{LOG_LEVEL_ENV} is not a logging level: {raw!r}")
        return cls(level=level)

    def apply(self, *, force: bool = False) -> None:
        configure_logging(level=self.level, force=force)


def get_logging_config() -> LoggingConfig:
    return LoggingConfig.from_environment()
