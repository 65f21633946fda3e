"""Prompt failure categories.

Every failure carries a short ``reason`` tag so callers that only care about the
category can branch on it without importing each class.
"""

from __future__ import annotations

from typing import ClassVar

from clientutil.errors import ClientUtilError


class PromptError(ClientUtilError):
    """Base class for prompt failures."""

    reason: ClassVar[str] = "error"


class PromptTimeoutError(PromptError):
    """No message was accepted before the deadline."""

    reason: ClassVar[str] = "time"

    def __init__(self, timeout: float) -> None:
        super().__init__(f"No accepted response within {timeout:g}s")
        self.timeout = timeout


class PromptCheckError(PromptError):
    """The validation check raised while evaluating a response."""

    def __init__(self, error: Exception) -> None:
        super().__init__(f"Prompt check failed: {error!r}")
        self.error = error
        self.__cause__ = error


class PromptSendError(PromptError):
    """Delivering the prompt message failed; nothing was collected."""

    reason: ClassVar[str] = "send"


class PromptCancelledError(PromptError):
    """The prompt was cancelled before it produced an outcome."""

    reason: ClassVar[str] = "cancelled"
