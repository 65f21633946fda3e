"""Interactive prompt collection."""

from __future__ import annotations

from .errors import (
    PromptCancelledError,
    PromptCheckError,
    PromptError,
    PromptSendError,
    PromptTimeoutError,
)
from .prompt import prompt, prompt_in
from .session import (
    TERMINAL_STATES,
    PromptCheck,
    PromptCheckFunction,
    PromptContext,
    PromptSession,
    PromptState,
)

__all__ = [
    "TERMINAL_STATES",
    "PromptCancelledError",
    "PromptCheck",
    "PromptCheckError",
    "PromptCheckFunction",
    "PromptContext",
    "PromptError",
    "PromptSendError",
    "PromptSession",
    "PromptState",
    "PromptTimeoutError",
    "prompt",
    "prompt_in",
]
