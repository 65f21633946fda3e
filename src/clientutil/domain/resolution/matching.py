"""Text-to-entity matching policy.

Responsibilities of this stage:
- decide whether a piece of user-typed text refers to one entity
- apply the same ordered rules to every entity kind, driven by a descriptor

Rules, first success wins:
1. exact id equality
2. id extracted from the kind's mention token
3. case folding of the text and the name fields (unless case sensitive)
4. name comparison: equality for whole words, containment otherwise
5. ``name#discriminator`` compound form, for kinds with a discriminator
6. the same name rules again with the kind's sigil stripped from the text

Out of scope for this stage:
- candidate ordering (see :mod:`clientutil.domain.resolution.resolve`)
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final

from clientutil.domain.model import EntityKind

if TYPE_CHECKING:
    from collections.abc import Iterable


type NameFields = Callable[[Any], Iterable[str | None]]
type DiscriminatorField = Callable[[Any], str | None]
type SigilStripper = Callable[[str], str]


@dataclass(frozen=True, slots=True)
class MatchFlags:
    case_sensitive: bool = False
    whole_word: bool = False


DEFAULT_FLAGS: Final[MatchFlags] = MatchFlags()


@dataclass(frozen=True, slots=True)
class EntityDescriptor:
    """How one entity kind is matched."""

    kind: EntityKind
    names: NameFields
    mention_pattern: re.Pattern[str] | None = None
    discriminator: DiscriminatorField | None = None
    strip_sigil: SigilStripper | None = None


def matches(
    descriptor: EntityDescriptor,
    text: str,
    entity: object,
    flags: MatchFlags = DEFAULT_FLAGS,
) -> bool:
    """Return whether ``text`` could be referring to ``entity``."""

    entity_id = str(getattr(entity, "id", ""))
    if entity_id == text:
        return True

    if descriptor.mention_pattern is not None:
        mention = descriptor.mention_pattern.search(text)
        if mention is not None and mention.group(1) == entity_id:
            return True

    names = [name for name in descriptor.names(entity) if name is not None]
    if not flags.case_sensitive:
        text = text.lower()
        names = [name.lower() for name in names]
    discriminator = descriptor.discriminator(entity) if descriptor.discriminator else None

    if _matches_names(text, names, discriminator, flags.whole_word):
        return True

    if descriptor.strip_sigil is not None:
        stripped = descriptor.strip_sigil(text)
        if stripped != text:
            return _matches_names(stripped, names, discriminator, flags.whole_word)
    return False


def _matches_names(
    text: str,
    names: list[str],
    discriminator: str | None,
    whole_word: bool,
) -> bool:
    if any(_compare(text, name, whole_word) for name in names):
        return True

    if discriminator is None or "#" not in text:
        return False
    parts = text.split("#")
    name_part, discriminator_part = parts[0], parts[1]
    return any(_compare(name_part, name, whole_word) for name in names) and _compare(
        discriminator_part, discriminator, whole_word
    )


def _compare(text: str, field: str, whole_word: bool) -> bool:
    return field == text if whole_word else text in field


def _strip_leading(sigil: str) -> SigilStripper:
    def strip(text: str) -> str:
        return text.removeprefix(sigil)

    return strip


def _strip_colons(text: str) -> str:
    return text.removeprefix(":").removesuffix(":")


USER_MENTION: Final[re.Pattern[str]] = re.compile(r"<@!?(\d+)>")
CHANNEL_MENTION: Final[re.Pattern[str]] = re.compile(r"<#(\d+)>")
ROLE_MENTION: Final[re.Pattern[str]] = re.compile(r"<@&(\d+)>")
EMOJI_MENTION: Final[re.Pattern[str]] = re.compile(r"<a?:[a-zA-Z0-9_]+:(\d+)>")


def _name(entity: Any) -> tuple[str | None]:
    return (entity.name,)


USER: Final[EntityDescriptor] = EntityDescriptor(
    kind=EntityKind.USER,
    names=lambda user: (user.username,),
    mention_pattern=USER_MENTION,
    discriminator=lambda user: user.discriminator,
)

MEMBER: Final[EntityDescriptor] = EntityDescriptor(
    kind=EntityKind.MEMBER,
    names=lambda member: (member.user.username, member.display_name),
    mention_pattern=USER_MENTION,
    discriminator=lambda member: member.user.discriminator,
)

CHANNEL: Final[EntityDescriptor] = EntityDescriptor(
    kind=EntityKind.CHANNEL,
    names=_name,
    mention_pattern=CHANNEL_MENTION,
    strip_sigil=_strip_leading("#"),
)

ROLE: Final[EntityDescriptor] = EntityDescriptor(
    kind=EntityKind.ROLE,
    names=_name,
    mention_pattern=ROLE_MENTION,
    strip_sigil=_strip_leading("@"),
)

EMOJI: Final[EntityDescriptor] = EntityDescriptor(
    kind=EntityKind.EMOJI,
    names=_name,
    mention_pattern=EMOJI_MENTION,
    strip_sigil=_strip_colons,
)

GUILD: Final[EntityDescriptor] = EntityDescriptor(kind=EntityKind.GUILD, names=_name)

DESCRIPTORS: Final[dict[EntityKind, EntityDescriptor]] = {
    descriptor.kind: descriptor for descriptor in (USER, MEMBER, CHANNEL, ROLE, EMOJI, GUILD)
}


__all__ = [
    "CHANNEL",
    "DEFAULT_FLAGS",
    "DESCRIPTORS",
    "EMOJI",
    "GUILD",
    "MEMBER",
    "ROLE",
    "USER",
    "EntityDescriptor",
    "MatchFlags",
    "matches",
]
