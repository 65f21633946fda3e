"""In-memory implementations of the messaging and settings ports.

Useful for tests, local experiments and for bridging platform bindings that
deliver events through callbacks: call :meth:`InMemoryChannel.dispatch` from
the binding's message handler and every active subscription sees the message.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Any

from clientutil.errors import MessageNotFoundError, ProviderNotOpenError

if TYPE_CHECKING:
    from clientutil.domain.model import Identified, Snowflake
    from clientutil.domain.ports import MessageListener

log = getLogger(__name__)

_message_ids = itertools.count(1)


def next_message_id() -> str:
    return f"m{next(_message_ids)}"


@dataclass(slots=True)
class InMemoryMessage:
    author: Identified
    channel: InMemoryChannel
    content: str | None = None
    options: dict[str, Any] = field(default_factory=dict)
    id: str = field(default_factory=next_message_id)


@dataclass(slots=True, eq=False)
class InMemorySubscription:
    channel: InMemoryChannel
    listener: MessageListener
    closed: bool = False

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.channel.unsubscribe(self)


@dataclass(slots=True, eq=False)
class InMemoryChannel:
    """Text channel that keeps its history and fans messages out to listeners.

    ``author`` is who :meth:`send` posts as (the bot account).
    """

    id: str
    author: Identified
    history: list[InMemoryMessage] = field(default_factory=list)
    fail_sends_with: Exception | None = None
    _subscriptions: list[InMemorySubscription] = field(default_factory=list, repr=False)

    @property
    def listener_count(self) -> int:
        return len(self._subscriptions)

    async def send(self, content: str | None = None, **options: Any) -> InMemoryMessage:
        if self.fail_sends_with is not None:
            raise self.fail_sends_with
        message = InMemoryMessage(
            author=self.author, channel=self, content=content, options=dict(options)
        )
        self.dispatch(message)
        return message

    def post(self, author: Identified, content: str | None = None) -> InMemoryMessage:
        """Simulate ``author`` writing ``content`` in this channel."""
        message = InMemoryMessage(author=author, channel=self, content=content)
        self.dispatch(message)
        return message

    def dispatch(self, message: InMemoryMessage) -> None:
        self.history.append(message)
        for subscription in tuple(self._subscriptions):
            if not subscription.closed:
                subscription.listener(message)

    def subscribe(self, listener: MessageListener) -> InMemorySubscription:
        subscription = InMemorySubscription(channel=self, listener=listener)
        self._subscriptions.append(subscription)
        return subscription

    def unsubscribe(self, subscription: InMemorySubscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    async def fetch_message(self, message_id: Snowflake) -> InMemoryMessage:
        for message in self.history:
            if message.id == str(message_id):
                return message
        raise MessageNotFoundError(str(message_id))

    async def fetch_messages(
        self, *, around: Snowflake, limit: int = 50
    ) -> dict[str, InMemoryMessage]:
        index = next(
            (i for i, message in enumerate(self.history) if message.id == str(around)), None
        )
        if index is None or limit <= 0:
            return {}
        start = max(0, index - (limit - 1) // 2)
        window = self.history[start : start + limit]
        return {message.id: message for message in window}


@dataclass(slots=True, eq=False)
class InMemoryUser:
    """A user reachable by private message."""

    id: str
    username: str
    discriminator: str = "0000"
    bot: bool = False
    dm_channel: InMemoryChannel | None = None
    me: Identified | None = None

    async def create_dm(self) -> InMemoryChannel:
        if self.dm_channel is None:
            self.dm_channel = InMemoryChannel(id=f"dm-{self.id}", author=self.me or self)
        return self.dm_channel

    async def send(self, content: str | None = None, **options: Any) -> InMemoryMessage:
        channel = await self.create_dm()
        return await channel.send(content, **options)


@dataclass(slots=True, eq=False)
class InMemorySettingsProvider:
    """Settings provider keeping ``table -> key -> value`` in a dict."""

    tables: dict[str, dict[str, object]] = field(default_factory=dict)
    is_open: bool = False

    async def open(self) -> None:
        self.is_open = True
        log.debug("Opened in-memory settings provider with %d tables", len(self.tables))

    async def add(self, table: str, key: str, data: object) -> None:
        self._ensure_open()
        self.tables.setdefault(table, {})[key] = data

    async def query(self, table: str, key: str) -> object | None:
        self._ensure_open()
        return self.tables.get(table, {}).get(key)

    def _ensure_open(self) -> None:
        if not self.is_open:
            raise ProviderNotOpenError(f"{type(self).__name__} has not been opened")


__all__ = [
    "InMemoryChannel",
    "InMemoryMessage",
    "InMemorySettingsProvider",
    "InMemorySubscription",
    "InMemoryUser",
]
