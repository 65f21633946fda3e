"""Ports for sending and receiving chat messages."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from clientutil.domain.model import Identified, Snowflake


type MessageListener = Callable[[Message], None]


@runtime_checkable
class Message(Protocol):
    """A message as seen by the collector."""

    @property
    def id(self) -> Snowflake: ...

    @property
    def author(self) -> Identified: ...

    @property
    def content(self) -> str | None: ...

    @property
    def channel(self) -> TextChannel: ...


class Subscription(Protocol):
    """Handle returned by :meth:`TextChannel.subscribe`; closing it is idempotent."""

    def close(self) -> None: ...


@runtime_checkable
class TextChannel(Protocol):
    """Channel port: send messages and observe new ones in arrival order."""

    @property
    def id(self) -> Snowflake: ...

    async def send(self, content: str | None = None, **options: Any) -> Message: ...

    def subscribe(self, listener: MessageListener) -> Subscription: ...

    async def fetch_message(self, message_id: Snowflake) -> Message: ...

    async def fetch_messages(
        self, *, around: Snowflake, limit: int = 50
    ) -> Mapping[str, Message]: ...


@runtime_checkable
class DirectPeer(Protocol):
    """A user reachable through a private channel."""

    @property
    def id(self) -> Snowflake: ...

    @property
    def dm_channel(self) -> TextChannel | None: ...

    async def send(self, content: str | None = None, **options: Any) -> Message: ...

    async def create_dm(self) -> TextChannel: ...


class PromptTarget(Protocol):
    """Anything carrying the channel to prompt in and the author to wait for.

    A received command message satisfies this directly.
    """

    @property
    def channel(self) -> TextChannel: ...

    @property
    def author(self) -> Identified: ...


__all__ = [
    "DirectPeer",
    "Message",
    "MessageListener",
    "PromptTarget",
    "Subscription",
    "TextChannel",
]
