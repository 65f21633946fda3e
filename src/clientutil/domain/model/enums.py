"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import IntEnum, StrEnum


class EntityKind(StrEnum):
    """Kinds of platform entity a reference can be resolved to."""

    USER = "user"
    MEMBER = "member"
    CHANNEL = "channel"
    ROLE = "role"
    EMOJI = "emoji"
    GUILD = "guild"


class StreamingChange(IntEnum):
    NO_CHANGE = 0
    STOPPED = 1
    STARTED = 2
