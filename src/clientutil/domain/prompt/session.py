"""Single-fire prompt collection state machine.

A session waits for one message on a channel from one author. Only three things
end it: an accepted message, a check that raises, or the deadline (plus an
optional external cancel). A rejected message leaves the session collecting.
"""

from __future__ import annotations

import asyncio
import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING, Any, Final

from clientutil.config.prompt import DEFAULT_PROMPT_TIMEOUT_SECONDS

from .errors import (
    PromptCancelledError,
    PromptCheckError,
    PromptError,
    PromptSendError,
    PromptTimeoutError,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from clientutil.domain.model import Identified, Snowflake
    from clientutil.domain.ports import Message, Subscription, TextChannel

log = getLogger(__name__)


type PromptCheckFunction = Callable[[Message, Message | None], object]
type PromptCheck = PromptCheckFunction | re.Pattern[str] | str


class PromptState(StrEnum):
    INIT = "init"
    SENDING = "sending"
    COLLECTING = "collecting"
    PASSED = "passed"
    ERRORED = "errored"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"


TERMINAL_STATES: Final[frozenset[PromptState]] = frozenset(
    {PromptState.PASSED, PromptState.ERRORED, PromptState.TIMED_OUT, PromptState.CANCELLED}
)


@dataclass(frozen=True, slots=True)
class PromptContext:
    """Synthetic prompt target: where to listen and whom to listen to."""

    channel: TextChannel
    author: Identified


class PromptSession:
    """One prompt invocation. Use :meth:`send` (optional) then :meth:`collect`."""

    def __init__(
        self,
        channel: TextChannel,
        author_id: Snowflake,
        *,
        check: PromptCheck | None = None,
        timeout: float = DEFAULT_PROMPT_TIMEOUT_SECONDS,
        cancel: asyncio.Event | None = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError(f"Prompt timeout must be positive, got {timeout!r}")
        self.channel = channel
        self.author_id = str(author_id)
        self.check: PromptCheckFunction | re.Pattern[str] | None = (
            re.compile(check) if isinstance(check, str) else check
        )
        self.timeout = timeout
        self.cancel_event = cancel
        self.sent: Message | None = None
        self.state = PromptState.INIT
        self._outcome: asyncio.Future[Message] | None = None
        self._subscription: Subscription | None = None
        self._timer: asyncio.TimerHandle | None = None
        self._cancel_watcher: asyncio.Task[None] | None = None

    @property
    def done(self) -> bool:
        return self.state in TERMINAL_STATES

    async def send(self, content: str | None, options: Mapping[str, Any] | None = None) -> Message:
        """Deliver the prompt message and remember it as the self-echo guard."""

        if self.state is not PromptState.INIT:
            raise RuntimeError(f"Cannot send from a {self.state} prompt session")
        self.state = PromptState.SENDING
        try:
            sent = await self.channel.send(content, **dict(options or {}))
        except Exception as exc:
            self.state = PromptState.ERRORED
            log.warning("Sending prompt to channel %s failed: %r", self.channel.id, exc)
            raise PromptSendError(f"Could not send prompt: {exc}") from exc
        self.sent = sent
        return sent

    async def collect(self) -> Message:
        """Wait for the first accepted message; raise a :class:`PromptError` otherwise."""

        if self.state is PromptState.CANCELLED:
            raise PromptCancelledError("Prompt was cancelled before collecting")
        if self.state not in (PromptState.INIT, PromptState.SENDING):
            raise RuntimeError(f"Cannot collect from a {self.state} prompt session")

        loop = asyncio.get_running_loop()
        self._outcome = loop.create_future()
        self.state = PromptState.COLLECTING
        log.debug(
            "Collecting prompt response in channel %s from author %s (timeout=%ss)",
            self.channel.id,
            self.author_id,
            self.timeout,
        )
        self._subscription = self.channel.subscribe(self._on_message)
        self._timer = loop.call_later(self.timeout, self._expire)
        if self.cancel_event is not None:
            self._cancel_watcher = asyncio.ensure_future(self._watch_cancel(self.cancel_event))

        try:
            return await self._outcome
        except asyncio.CancelledError:
            if not self.done:
                self.state = PromptState.CANCELLED
            raise
        finally:
            self._release()

    def cancel(self) -> bool:
        """Cancel the session; returns ``False`` when it had already ended."""

        if self.state in (PromptState.INIT, PromptState.SENDING):
            self.state = PromptState.CANCELLED
            return True
        return self._finish(
            PromptState.CANCELLED, error=PromptCancelledError("Prompt was cancelled")
        )

    def _on_message(self, message: Message) -> None:
        if self.state is not PromptState.COLLECTING:
            return
        if self.sent is not None and str(message.id) == str(self.sent.id):
            return
        if str(message.author.id) != self.author_id:
            return

        try:
            passed = self._evaluate(message)
        except Exception as exc:  # noqa: BLE001
            log.warning("Prompt check raised for message %s: %r", message.id, exc)
            self._finish(PromptState.ERRORED, error=PromptCheckError(exc))
            return

        if passed:
            self._finish(PromptState.PASSED, result=message)
        else:
            log.debug("Prompt response %s rejected; still collecting", message.id)

    def _evaluate(self, message: Message) -> bool:
        check = self.check
        if check is None:
            return True
        if isinstance(check, re.Pattern):
            return check.search(message.content or "") is not None
        checked = check(message, self.sent)
        return checked is not None and checked is not False

    def _expire(self) -> None:
        self._finish(PromptState.TIMED_OUT, error=PromptTimeoutError(self.timeout))

    async def _watch_cancel(self, event: asyncio.Event) -> None:
        await event.wait()
        self.cancel()

    def _finish(
        self,
        state: PromptState,
        *,
        result: Message | None = None,
        error: PromptError | None = None,
    ) -> bool:
        if self.done:
            return False
        self.state = state
        self._release()
        outcome = self._outcome
        if outcome is not None and not outcome.done():
            if error is not None:
                outcome.set_exception(error)
            else:
                outcome.set_result(result)
        log.debug("Prompt in channel %s ended: %s", self.channel.id, state)
        return True

    def _release(self) -> None:
        if self._subscription is not None:
            self._subscription.close()
            self._subscription = None
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        watcher = self._cancel_watcher
        if watcher is not None:
            self._cancel_watcher = None
            if watcher is not asyncio.current_task():
                watcher.cancel()


__all__ = [
    "TERMINAL_STATES",
    "PromptCheck",
    "PromptCheckFunction",
    "PromptContext",
    "PromptSession",
    "PromptState",
]
