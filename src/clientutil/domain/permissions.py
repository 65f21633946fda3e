"""Permission bitmask codec."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import IntFlag

from pydantic import BaseModel, ConfigDict, field_validator

log = logging.getLogger(__name__)


class Permission(IntFlag):
    """Platform permission bits, in declaration order."""

    CREATE_INSTANT_INVITE = 1 << 0
    KICK_MEMBERS = 1 << 1
    BAN_MEMBERS = 1 << 2
    ADMINISTRATOR = 1 << 3
    MANAGE_CHANNELS = 1 << 4
    MANAGE_GUILD = 1 << 5
    ADD_REACTIONS = 1 << 6
    VIEW_AUDIT_LOG = 1 << 7
    PRIORITY_SPEAKER = 1 << 8
    VIEW_CHANNEL = 1 << 10
    SEND_MESSAGES = 1 << 11
    SEND_TTS_MESSAGES = 1 << 12
    MANAGE_MESSAGES = 1 << 13
    EMBED_LINKS = 1 << 14
    ATTACH_FILES = 1 << 15
    READ_MESSAGE_HISTORY = 1 << 16
    MENTION_EVERYONE = 1 << 17
    USE_EXTERNAL_EMOJIS = 1 << 18
    CONNECT = 1 << 20
    SPEAK = 1 << 21
    MUTE_MEMBERS = 1 << 22
    DEAFEN_MEMBERS = 1 << 23
    MOVE_MEMBERS = 1 << 24
    USE_VAD = 1 << 25
    CHANGE_NICKNAME = 1 << 26
    MANAGE_NICKNAMES = 1 << 27
    MANAGE_ROLES = 1 << 28
    MANAGE_WEBHOOKS = 1 << 29
    MANAGE_EMOJIS = 1 << 30


ALL_PERMISSIONS = Permission(sum(permission.value for permission in Permission))


def permission_names() -> list[str]:
    return [permission.name for permission in Permission if permission.name]


def resolve_permission_number(number: object) -> list[str]:
    """Return the names of the permissions set in ``number``, in table order.

    Values that cannot be read as an integer resolve to no permissions.
    """

    try:
        bits = int(number)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        log.debug("Ignoring non-integer permission value %r", number)
        return []
    return [
        permission.name for permission in Permission if permission.name and bits & permission.value
    ]


class _OverwriteBase(BaseModel):
    model_config = ConfigDict(extra="allow", from_attributes=True)

    id: str | None = None
    type: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value


class PermissionOverwrite(_OverwriteBase):
    """Channel permission overwrite as delivered by the platform."""

    allow: int = 0
    deny: int = 0

    @field_validator("allow", "deny", mode="before")
    @classmethod
    def _lenient_bitmask(cls, value: object) -> int:
        """Undecodable bitmasks count as no permissions instead of failing validation."""
        try:
            bits = int(value)  # type: ignore[call-overload]
        except (TypeError, ValueError):
            log.debug("Treating non-integer overwrite bitmask %r as 0", value)
            return 0
        if bits != value and not isinstance(value, str):
            log.debug("Treating fractional overwrite bitmask %r as 0", value)
            return 0
        return bits


class ResolvedPermissionOverwrite(_OverwriteBase):
    """Overwrite with ``allow``/``deny`` decoded into permission names."""

    allow: list[str]
    deny: list[str]


def resolve_permission_overwrite(
    overwrite: PermissionOverwrite | Mapping[str, object] | object,
) -> ResolvedPermissionOverwrite:
    """Shallow-copy ``overwrite`` with its bitmasks decoded into name lists."""

    if isinstance(overwrite, PermissionOverwrite):
        parsed = overwrite
    elif isinstance(overwrite, Mapping):
        parsed = PermissionOverwrite.model_validate(dict(overwrite))
    else:
        parsed = PermissionOverwrite.model_validate(overwrite)

    data = parsed.model_dump()
    data["allow"] = resolve_permission_number(parsed.allow)
    data["deny"] = resolve_permission_number(parsed.deny)
    return ResolvedPermissionOverwrite.model_validate(data)


__all__ = [
    "ALL_PERMISSIONS",
    "Permission",
    "PermissionOverwrite",
    "ResolvedPermissionOverwrite",
    "permission_names",
    "resolve_permission_number",
    "resolve_permission_overwrite",
]
