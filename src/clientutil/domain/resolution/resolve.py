"""Resolve user-typed references against ordered candidate sets.

Every kind gets the same three operations:

- ``resolve_<kind>``: first matching candidate, or ``None``
- ``resolve_<kind>s``: every matching candidate, in input order
- ``check_<kind>``: the yes/no predicate for a single entity

Candidates are either a mapping of id to entity (the usual platform cache
shape; iteration follows the mapping's values) or any ordered iterable of
entities. No-match is a normal result and never raises.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from .matching import CHANNEL, EMOJI, GUILD, MEMBER, ROLE, USER, MatchFlags, matches

if TYPE_CHECKING:
    from collections.abc import Iterable

    from clientutil.domain.model import MemberLike, Named, RoleLike, UserLike

    from .matching import EntityDescriptor


type Candidates[T] = Mapping[str, T] | Mapping[int, T] | Iterable[T]


def _iter_candidates[T](candidates: Candidates[T]) -> Iterable[T]:
    if isinstance(candidates, Mapping):
        return candidates.values()
    return candidates


def check(
    descriptor: EntityDescriptor,
    text: str,
    entity: object,
    *,
    case_sensitive: bool = False,
    whole_word: bool = False,
) -> bool:
    return matches(
        descriptor,
        text,
        entity,
        MatchFlags(case_sensitive=case_sensitive, whole_word=whole_word),
    )


def resolve[T](
    descriptor: EntityDescriptor,
    text: str,
    candidates: Candidates[T],
    *,
    case_sensitive: bool = False,
    whole_word: bool = False,
) -> T | None:
    flags = MatchFlags(case_sensitive=case_sensitive, whole_word=whole_word)
    for candidate in _iter_candidates(candidates):
        if matches(descriptor, text, candidate, flags):
            return candidate
    return None


def resolve_all[T](
    descriptor: EntityDescriptor,
    text: str,
    candidates: Candidates[T],
    *,
    case_sensitive: bool = False,
    whole_word: bool = False,
) -> list[T]:
    flags = MatchFlags(case_sensitive=case_sensitive, whole_word=whole_word)
    return [
        candidate
        for candidate in _iter_candidates(candidates)
        if matches(descriptor, text, candidate, flags)
    ]


# Users


def resolve_user[T: UserLike](
    text: str, users: Candidates[T], *, case_sensitive: bool = False, whole_word: bool = False
) -> T | None:
    """Resolve a user from an id, a mention, a username or ``username#discriminator``."""
    return resolve(USER, text, users, case_sensitive=case_sensitive, whole_word=whole_word)


def resolve_users[T: UserLike](
    text: str, users: Candidates[T], *, case_sensitive: bool = False, whole_word: bool = False
) -> list[T]:
    return resolve_all(USER, text, users, case_sensitive=case_sensitive, whole_word=whole_word)


def check_user(
    text: str, user: UserLike, *, case_sensitive: bool = False, whole_word: bool = False
) -> bool:
    return check(USER, text, user, case_sensitive=case_sensitive, whole_word=whole_word)


# Members


def resolve_member[T: MemberLike](
    text: str, members: Candidates[T], *, case_sensitive: bool = False, whole_word: bool = False
) -> T | None:
    """Resolve a member by id, mention, username, display name or tag."""
    return resolve(MEMBER, text, members, case_sensitive=case_sensitive, whole_word=whole_word)


def resolve_members[T: MemberLike](
    text: str, members: Candidates[T], *, case_sensitive: bool = False, whole_word: bool = False
) -> list[T]:
    return resolve_all(
        MEMBER, text, members, case_sensitive=case_sensitive, whole_word=whole_word
    )


def check_member(
    text: str, member: MemberLike, *, case_sensitive: bool = False, whole_word: bool = False
) -> bool:
    return check(MEMBER, text, member, case_sensitive=case_sensitive, whole_word=whole_word)


# Channels


def resolve_channel[T: Named](
    text: str, channels: Candidates[T], *, case_sensitive: bool = False, whole_word: bool = False
) -> T | None:
    """Resolve a guild channel by id, ``<#id>`` mention or name (``#name`` accepted)."""
    return resolve(CHANNEL, text, channels, case_sensitive=case_sensitive, whole_word=whole_word)


def resolve_channels[T: Named](
    text: str, channels: Candidates[T], *, case_sensitive: bool = False, whole_word: bool = False
) -> list[T]:
    return resolve_all(
        CHANNEL, text, channels, case_sensitive=case_sensitive, whole_word=whole_word
    )


def check_channel(
    text: str, channel: Named, *, case_sensitive: bool = False, whole_word: bool = False
) -> bool:
    return check(CHANNEL, text, channel, case_sensitive=case_sensitive, whole_word=whole_word)


# Roles


def resolve_role[T: RoleLike](
    text: str, roles: Candidates[T], *, case_sensitive: bool = False, whole_word: bool = False
) -> T | None:
    """Resolve a role by id, ``<@&id>`` mention or name (``@name`` accepted)."""
    return resolve(ROLE, text, roles, case_sensitive=case_sensitive, whole_word=whole_word)


def resolve_roles[T: RoleLike](
    text: str, roles: Candidates[T], *, case_sensitive: bool = False, whole_word: bool = False
) -> list[T]:
    return resolve_all(ROLE, text, roles, case_sensitive=case_sensitive, whole_word=whole_word)


def check_role(
    text: str, role: RoleLike, *, case_sensitive: bool = False, whole_word: bool = False
) -> bool:
    return check(ROLE, text, role, case_sensitive=case_sensitive, whole_word=whole_word)


# Emojis


def resolve_emoji[T: Named](
    text: str, emojis: Candidates[T], *, case_sensitive: bool = False, whole_word: bool = False
) -> T | None:
    """Resolve a custom emoji by id, ``<:name:id>`` token or name (``:name:`` accepted)."""
    return resolve(EMOJI, text, emojis, case_sensitive=case_sensitive, whole_word=whole_word)


def resolve_emojis[T: Named](
    text: str, emojis: Candidates[T], *, case_sensitive: bool = False, whole_word: bool = False
) -> list[T]:
    return resolve_all(EMOJI, text, emojis, case_sensitive=case_sensitive, whole_word=whole_word)


def check_emoji(
    text: str, emoji: Named, *, case_sensitive: bool = False, whole_word: bool = False
) -> bool:
    return check(EMOJI, text, emoji, case_sensitive=case_sensitive, whole_word=whole_word)


# Guilds


def resolve_guild[T: Named](
    text: str, guilds: Candidates[T], *, case_sensitive: bool = False, whole_word: bool = False
) -> T | None:
    """Resolve a guild by id or name; guilds have no mention token."""
    return resolve(GUILD, text, guilds, case_sensitive=case_sensitive, whole_word=whole_word)


def resolve_guilds[T: Named](
    text: str, guilds: Candidates[T], *, case_sensitive: bool = False, whole_word: bool = False
) -> list[T]:
    return resolve_all(GUILD, text, guilds, case_sensitive=case_sensitive, whole_word=whole_word)


def check_guild(
    text: str, guild: Named, *, case_sensitive: bool = False, whole_word: bool = False
) -> bool:
    return check(GUILD, text, guild, case_sensitive=case_sensitive, whole_word=whole_word)
