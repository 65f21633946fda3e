from __future__ import annotations

import pytest

from clientutil.adapters import InMemoryChannel
from clientutil.domain.model import Channel, Emoji, Guild, Member, Role, User


@pytest.fixture
def bob() -> User:
    return User(id="101", username="Bob", discriminator="4521")


@pytest.fixture
def users(bob: User) -> dict[str, User]:
    candidates = (
        bob,
        User(id="102", username="bobby", discriminator="1234"),
        User(id="103", username="Alice", discriminator="0001"),
    )
    return {user.id: user for user in candidates}


@pytest.fixture
def roles() -> dict[str, Role]:
    candidates = (
        Role(id="9", name="Moderator", color=0x00FF00, hoist=True, position=5),
        Role(id="10", name="Admin", color=0xFF0000, position=10),
        Role(id="11", name="Member", position=1),
    )
    return {role.id: role for role in candidates}


@pytest.fixture
def members(users: dict[str, User], roles: dict[str, Role]) -> dict[str, Member]:
    candidates = (
        Member(user=users["101"], display_name="Bobert", roles=(roles["11"],)),
        Member(user=User(id="201", username="carol", discriminator="7777"), display_name="Caz"),
        Member(user=users["103"]),
    )
    return {member.id: member for member in candidates}


@pytest.fixture
def channels() -> dict[str, Channel]:
    candidates = (
        Channel(id="5", name="general"),
        Channel(id="6", name="general-chat"),
        Channel(id="7", name="memes"),
    )
    return {channel.id: channel for channel in candidates}


@pytest.fixture
def emojis() -> dict[str, Emoji]:
    candidates = (
        Emoji(id="42", name="smile"),
        Emoji(id="43", name="smiley", animated=True),
    )
    return {emoji.id: emoji for emoji in candidates}


@pytest.fixture
def guilds() -> dict[str, Guild]:
    candidates = (
        Guild(id="1", name="Python Discord"),
        Guild(id="2", name="Python Helpers"),
    )
    return {guild.id: guild for guild in candidates}


@pytest.fixture
def bot() -> User:
    return User(id="900", username="helper", discriminator="0000", bot=True)


@pytest.fixture
def alice() -> User:
    return User(id="103", username="Alice", discriminator="0001")


@pytest.fixture
def channel(bot: User) -> InMemoryChannel:
    return InMemoryChannel(id="5", author=bot)
