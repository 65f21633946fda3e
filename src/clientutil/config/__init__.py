"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, positive_float_env_var
from .errors import ConfigurationError
from .logging import LOG_LEVEL_ENV, LoggingConfig, get_logging_config
from .prompt import (
    DEFAULT_PROMPT_TIMEOUT_SECONDS,
    PROMPT_TIMEOUT_ENV,
    PromptConfig,
    get_prompt_config,
)

__all__ = [
    "DEFAULT_PROMPT_TIMEOUT_SECONDS",
    "LOG_LEVEL_ENV",
    "PROMPT_TIMEOUT_ENV",
    "ConfigurationError",
    "LoggingConfig",
    "PromptConfig",
    "get_logging_config",
    "get_prompt_config",
    "optional_env_var",
    "positive_float_env_var",
]
