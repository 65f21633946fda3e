from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

from clientutil import ClientUtil
from clientutil.config import PromptConfig
from clientutil.domain.model import StreamingChange, User
from clientutil.domain.prompt import PromptContext, PromptTimeoutError
from clientutil.errors import MessageNotFoundError
from tests.support.platform import FakeAccount, FakeClient, FakeGuild, wait_until_listening

if TYPE_CHECKING:
    from clientutil.adapters import InMemoryChannel
    from clientutil.domain.model import Channel, Member
    from clientutil.domain.ports import Message


@pytest.fixture
def util(bob: User) -> ClientUtil:
    return ClientUtil(
        client=FakeClient(users={bob.id: bob}),
        prompt_config=PromptConfig(default_timeout=0.05),
    )


def test_exposes_resolution_helpers(
    util: ClientUtil, channels: dict[str, Channel], members: dict[str, Member]
) -> None:
    assert util.resolve_channel("#general", channels) == channels["5"]
    assert util.resolve_members("caz", members) == [members["201"]]
    assert util.check_user("<@101>", members["101"].user)


def test_exposes_permission_and_member_helpers(util: ClientUtil, members: dict[str, Member]) -> None:
    assert util.resolve_permission_number(0) == []
    assert util.permission_names()[0] == "CREATE_INSTANT_INVITE"
    assert util.display_hex_color(members["101"]) == "#000000"
    assert util.compare_streaming(members["101"], members["101"]) is StreamingChange.NO_CHANGE


def test_prompt_uses_configured_default_timeout(
    util: ClientUtil, channel: InMemoryChannel, alice: User
) -> None:
    with pytest.raises(PromptTimeoutError) as exc:
        asyncio.run(util.prompt(PromptContext(channel=channel, author=alice), "Name?"))

    assert exc.value.timeout == 0.05


def test_prompt_in_with_explicit_timeout(
    util: ClientUtil, channel: InMemoryChannel, alice: User
) -> None:
    async def scenario() -> Message:
        task = asyncio.create_task(util.prompt_in(channel, alice, "Name?", timeout=5))
        await wait_until_listening(channel)
        channel.post(alice, "Alice")
        return await task

    assert asyncio.run(scenario()).content == "Alice"


def test_fetch_member_from(util: ClientUtil, bob: User) -> None:
    guild = FakeGuild(nicknames={bob.id: "Bobert"})

    member = asyncio.run(util.fetch_member_from(guild, 101, cache=False))

    assert member.user is bob
    assert member.display_name == "Bobert"
    assert util.client.fetched == [("101", False)]  # type: ignore[attr-defined]


def test_fetch_message_as_bot(util: ClientUtil, channel: InMemoryChannel, alice: User) -> None:
    posted = channel.post(alice, "hello")

    assert asyncio.run(util.fetch_message(channel, posted.id)) is posted


def test_fetch_message_as_user_account(channel: InMemoryChannel, alice: User) -> None:
    util = ClientUtil(client=FakeClient(user=FakeAccount(bot=False)), prompt_config=PromptConfig())
    channel.post(alice, "before")
    posted = channel.post(alice, "hello")
    channel.post(alice, "after")

    assert asyncio.run(util.fetch_message(channel, posted.id)) is posted
    with pytest.raises(MessageNotFoundError) as exc:
        asyncio.run(util.fetch_message(channel, "missing"))
    assert exc.value.message_id == "missing"
