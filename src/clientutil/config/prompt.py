"""Prompt collector configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import positive_float_env_var

DEFAULT_PROMPT_TIMEOUT_SECONDS: Final[float] = 30.0
PROMPT_TIMEOUT_ENV: Final[str] = "CLIENTUTIL_PROMPT_TIMEOUT"


@dataclass(frozen=True, slots=True)
class PromptConfig:
    """Defaults applied to prompts that do not pass their own timeout."""

    default_timeout: float = DEFAULT_PROMPT_TIMEOUT_SECONDS

    @classmethod
    def from_environment(cls) -> PromptConfig:
        return cls(
            default_timeout=positive_float_env_var(
                PROMPT_TIMEOUT_ENV, default=DEFAULT_PROMPT_TIMEOUT_SECONDS
            )
        )


def get_prompt_config() -> PromptConfig:
    return PromptConfig.from_environment()
