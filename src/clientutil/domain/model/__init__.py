"""Public domain model surface."""

from __future__ import annotations

from clientutil.domain.model.entities import (
    Channel,
    Emoji,
    Game,
    Guild,
    Member,
    Presence,
    Role,
    User,
)
from clientutil.domain.model.enums import EntityKind, StreamingChange
from clientutil.domain.model.protocols import (
    GameLike,
    Identified,
    MemberLike,
    Named,
    PresenceLike,
    RoleLike,
    Snowflake,
    UserLike,
)

__all__ = [
    "Channel",
    "Emoji",
    "EntityKind",
    "Game",
    "GameLike",
    "Guild",
    "Identified",
    "Member",
    "MemberLike",
    "Named",
    "Presence",
    "PresenceLike",
    "Role",
    "RoleLike",
    "Snowflake",
    "StreamingChange",
    "User",
    "UserLike",
]
