from __future__ import annotations

from types import SimpleNamespace

import pytest

from clientutil.domain.model import Channel, EntityKind, Guild, Member, Role, User
from clientutil.domain.resolution import (
    CHANNEL,
    DESCRIPTORS,
    GUILD,
    MEMBER,
    ROLE,
    USER,
    MatchFlags,
    matches,
)

ALL_FLAGS = [
    MatchFlags(),
    MatchFlags(case_sensitive=True),
    MatchFlags(whole_word=True),
    MatchFlags(case_sensitive=True, whole_word=True),
]


@pytest.mark.parametrize("flags", ALL_FLAGS)
@pytest.mark.parametrize(
    ("kind", "entity"),
    [
        (EntityKind.USER, User(id="101", username="Bob", discriminator="4521")),
        (EntityKind.MEMBER, Member(user=User(id="201", username="carol"), display_name="Caz")),
        (EntityKind.CHANNEL, Channel(id="5", name="general")),
        (EntityKind.ROLE, Role(id="9", name="Moderator")),
        (EntityKind.EMOJI, SimpleNamespace(id="42", name="smile")),
        (EntityKind.GUILD, Guild(id="1", name="Python Discord")),
    ],
)
def test_id_equality_matches_regardless_of_flags(
    kind: EntityKind, entity: object, flags: MatchFlags
) -> None:
    assert matches(DESCRIPTORS[kind], str(entity.id), entity, flags)  # type: ignore[attr-defined]


def test_integer_ids_are_compared_as_text() -> None:
    user = SimpleNamespace(id=101, username="Bob", discriminator="4521")

    assert matches(USER, "101", user)
    assert matches(USER, "<@101>", user)


def test_mention_extraction_wins_over_names() -> None:
    user = User(id="123", username="nobody", discriminator="0001")

    assert matches(USER, "<@123>", user)
    assert matches(USER, "<@!123>", user)
    assert not matches(USER, "<@124>", user)


def test_mention_is_found_inside_surrounding_text() -> None:
    channel = Channel(id="7", name="memes")

    assert matches(CHANNEL, "post it in <#7> please", channel)


def test_role_mention_is_not_a_user_mention() -> None:
    user = User(id="9", username="nine", discriminator="0009")
    role = Role(id="9", name="Moderator")

    assert not matches(USER, "<@&9>", user)
    assert matches(ROLE, "<@&9>", role)


def test_case_folding_applies_to_text_and_names() -> None:
    user = User(id="101", username="Bob", discriminator="4521")

    assert matches(USER, "BOB", user)
    assert matches(USER, "bO", user)
    assert not matches(USER, "bob", user, MatchFlags(case_sensitive=True))
    assert matches(USER, "Bo", user, MatchFlags(case_sensitive=True))


def test_whole_word_forces_equality() -> None:
    user = User(id="101", username="Bob", discriminator="4521")

    assert not matches(USER, "bo", user, MatchFlags(whole_word=True))
    assert matches(USER, "BOB", user, MatchFlags(whole_word=True))


def test_compound_tag_requires_name_and_discriminator() -> None:
    user = User(id="101", username="Bob", discriminator="4521")

    assert matches(USER, "Bob#4521", user)
    assert matches(USER, "bob#4521", user, MatchFlags(whole_word=True))
    assert matches(USER, "bo#45", user)
    assert not matches(USER, "bo#45", user, MatchFlags(whole_word=True))
    assert not matches(USER, "Bob#9999", user)
    assert not matches(USER, "Eve#4521", user)


def test_compound_tag_ignores_text_after_a_second_hash() -> None:
    user = User(id="101", username="Bob", discriminator="4521")

    assert matches(USER, "bob#4521#extra", user, MatchFlags(whole_word=True))


def test_member_matches_display_name_and_username() -> None:
    member = Member(user=User(id="201", username="carol", discriminator="7777"), display_name="Caz")

    assert matches(MEMBER, "caz", member, MatchFlags(whole_word=True))
    assert matches(MEMBER, "CAROL", member, MatchFlags(whole_word=True))
    assert matches(MEMBER, "Caz#7777", member, MatchFlags(whole_word=True))
    assert matches(MEMBER, "carol#7777", member, MatchFlags(whole_word=True))
    assert not matches(MEMBER, "Caz#0000", member)


def test_channel_sigil_is_stripped_as_fallback() -> None:
    channel = Channel(id="5", name="general")

    assert matches(CHANNEL, "#general", channel, MatchFlags(whole_word=True))
    assert matches(CHANNEL, "#GEN", channel)
    assert not matches(CHANNEL, "@general", channel, MatchFlags(whole_word=True))


def test_channel_keeps_literal_hash_names() -> None:
    channel = Channel(id="5", name="#hashtag")

    assert matches(CHANNEL, "#hashtag", channel, MatchFlags(whole_word=True))


def test_role_sigil_is_stripped_as_fallback() -> None:
    role = Role(id="9", name="Moderator")

    assert matches(ROLE, "@moderator", role, MatchFlags(whole_word=True))
    assert not matches(ROLE, "#moderator", role, MatchFlags(whole_word=True))


def test_emoji_colons_are_stripped_as_fallback() -> None:
    emoji = SimpleNamespace(id="42", name="smile")
    emoji_descriptor = DESCRIPTORS[EntityKind.EMOJI]

    assert matches(emoji_descriptor, ":smile:", emoji, MatchFlags(whole_word=True))
    assert matches(emoji_descriptor, ":smile", emoji, MatchFlags(whole_word=True))
    assert matches(emoji_descriptor, "<:whatever:42>", emoji)
    assert matches(emoji_descriptor, "<a:whatever:42>", emoji)
    assert not matches(emoji_descriptor, "<:smile:41>", emoji, MatchFlags(whole_word=True))


def test_guild_has_no_mention_sigil_or_discriminator() -> None:
    guild = Guild(id="1", name="Python Discord")

    assert matches(GUILD, "python", guild)
    assert not matches(GUILD, "<@1>", guild)
    assert not matches(GUILD, "<#1>", guild)
    assert not matches(GUILD, "#python discord", guild, MatchFlags(whole_word=True))
    assert not matches(GUILD, "python", guild, MatchFlags(whole_word=True))
    assert matches(GUILD, "PYTHON DISCORD", guild, MatchFlags(whole_word=True))


def test_descriptors_cover_every_kind() -> None:
    assert set(DESCRIPTORS) == set(EntityKind)
    assert DESCRIPTORS[EntityKind.GUILD].mention_pattern is None
    assert DESCRIPTORS[EntityKind.USER].discriminator is not None
    assert DESCRIPTORS[EntityKind.CHANNEL].discriminator is None
