"""Client-bound facade over the resolution, prompt and permission helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Any

from clientutil.config import PromptConfig
from clientutil.domain import members, permissions, resolution
from clientutil.domain import prompt as prompts
from clientutil.errors import MessageNotFoundError

if TYPE_CHECKING:
    import asyncio
    from collections.abc import Mapping

    from clientutil.domain.model import Identified, MemberLike, Snowflake
    from clientutil.domain.ports import (
        DirectPeer,
        MemberFetcher,
        Message,
        PlatformClient,
        PromptTarget,
        TextChannel,
    )
    from clientutil.domain.prompt import PromptCheck

log = getLogger(__name__)


@dataclass(slots=True)
class ClientUtil:
    """Client utilities to help with common tasks.

    Resolution, permission and display helpers are pure and exposed unchanged;
    prompts fall back to ``prompt_config.default_timeout`` when no timeout is
    passed; fetch helpers go through ``client``.
    """

    client: PlatformClient
    prompt_config: PromptConfig = field(default_factory=PromptConfig.from_environment)

    resolve_user = staticmethod(resolution.resolve_user)
    resolve_users = staticmethod(resolution.resolve_users)
    check_user = staticmethod(resolution.check_user)
    resolve_member = staticmethod(resolution.resolve_member)
    resolve_members = staticmethod(resolution.resolve_members)
    check_member = staticmethod(resolution.check_member)
    resolve_channel = staticmethod(resolution.resolve_channel)
    resolve_channels = staticmethod(resolution.resolve_channels)
    check_channel = staticmethod(resolution.check_channel)
    resolve_role = staticmethod(resolution.resolve_role)
    resolve_roles = staticmethod(resolution.resolve_roles)
    check_role = staticmethod(resolution.check_role)
    resolve_emoji = staticmethod(resolution.resolve_emoji)
    resolve_emojis = staticmethod(resolution.resolve_emojis)
    check_emoji = staticmethod(resolution.check_emoji)
    resolve_guild = staticmethod(resolution.resolve_guild)
    resolve_guilds = staticmethod(resolution.resolve_guilds)
    check_guild = staticmethod(resolution.check_guild)

    permission_names = staticmethod(permissions.permission_names)
    resolve_permission_number = staticmethod(permissions.resolve_permission_number)
    resolve_permission_overwrite = staticmethod(permissions.resolve_permission_overwrite)

    display_role = staticmethod(members.display_role)
    display_color = staticmethod(members.display_color)
    display_hex_color = staticmethod(members.display_hex_color)
    hoist_role = staticmethod(members.hoist_role)
    compare_streaming = staticmethod(members.compare_streaming)

    async def prompt(
        self,
        target: PromptTarget,
        content: str | None = None,
        check: PromptCheck | None = None,
        timeout: float | None = None,
        options: Mapping[str, Any] | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Message:
        """Prompt a user for input, returning the message that passes."""
        return await prompts.prompt(
            target, content, check, self._timeout(timeout), options, cancel=cancel
        )

    async def prompt_in(
        self,
        target: TextChannel | DirectPeer,
        user: Identified | None = None,
        content: str | None = None,
        check: PromptCheck | None = None,
        timeout: float | None = None,
        options: Mapping[str, Any] | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Message:
        """Prompt in a specific channel, or in a user's private channel."""
        return await prompts.prompt_in(
            target, user, content, check, self._timeout(timeout), options, cancel=cancel
        )

    async def fetch_member_from(
        self, guild: MemberFetcher, user_id: Snowflake, cache: bool = True
    ) -> MemberLike:
        """Fetch a user through the client, then their membership in ``guild``."""
        user = await self.client.fetch_user(user_id, cache)
        return await guild.fetch_member(user, cache)

    async def fetch_message(self, channel: TextChannel, message_id: Snowflake) -> Message:
        """Fetch a message by id; user accounts go through the surrounding history."""

        if self.client.user.bot:
            return await channel.fetch_message(message_id)

        messages = await channel.fetch_messages(around=message_id, limit=1)
        message = messages.get(str(message_id))
        if message is None:
            log.debug("Message %s not found in channel %s", message_id, channel.id)
            raise MessageNotFoundError(str(message_id))
        return message

    def _timeout(self, timeout: float | None) -> float:
        return self.prompt_config.default_timeout if timeout is None else timeout
