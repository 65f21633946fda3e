"""Entity resolution: text references to platform entities."""

from __future__ import annotations

from .matching import (
    CHANNEL,
    DESCRIPTORS,
    EMOJI,
    GUILD,
    MEMBER,
    ROLE,
    USER,
    EntityDescriptor,
    MatchFlags,
    matches,
)
from .resolve import (
    Candidates,
    check,
    check_channel,
    check_emoji,
    check_guild,
    check_member,
    check_role,
    check_user,
    resolve,
    resolve_all,
    resolve_channel,
    resolve_channels,
    resolve_emoji,
    resolve_emojis,
    resolve_guild,
    resolve_guilds,
    resolve_member,
    resolve_members,
    resolve_role,
    resolve_roles,
    resolve_user,
    resolve_users,
)

__all__ = [
    "CHANNEL",
    "DESCRIPTORS",
    "EMOJI",
    "GUILD",
    "MEMBER",
    "ROLE",
    "USER",
    "Candidates",
    "EntityDescriptor",
    "MatchFlags",
    "check",
    "check_channel",
    "check_emoji",
    "check_guild",
    "check_member",
    "check_role",
    "check_user",
    "matches",
    "resolve",
    "resolve_all",
    "resolve_channel",
    "resolve_channels",
    "resolve_emoji",
    "resolve_emojis",
    "resolve_guild",
    "resolve_guilds",
    "resolve_member",
    "resolve_members",
    "resolve_role",
    "resolve_roles",
    "resolve_user",
    "resolve_users",
]
