"""Display helpers derived from a member's roles and presence."""

from __future__ import annotations

from typing import TYPE_CHECKING

from clientutil.domain.model import StreamingChange

if TYPE_CHECKING:
    from collections.abc import Iterable

    from clientutil.domain.model import MemberLike, RoleLike


def _highest(roles: Iterable[RoleLike]) -> RoleLike | None:
    highest: RoleLike | None = None
    for role in roles:
        if highest is None or role.position > highest.position:
            highest = role
    return highest


def display_role(member: MemberLike) -> RoleLike | None:
    """The highest coloured role, which decides the member's name colour."""
    return _highest(role for role in member.roles if role.color)


def display_color(member: MemberLike) -> int:
    role = display_role(member)
    return role.color if role is not None else 0


def display_hex_color(member: MemberLike) -> str:
    return f"#{display_color(member):06x}"


def hoist_role(member: MemberLike) -> RoleLike | None:
    """The highest hoisted role, which decides where the member is listed."""
    return _highest(role for role in member.roles if role.hoist)


def _is_streaming(member: MemberLike) -> bool:
    presence = member.presence
    game = presence.game if presence is not None else None
    return bool(game is not None and game.streaming)


def compare_streaming(old_member: MemberLike, new_member: MemberLike) -> StreamingChange:
    """Tell whether a presence update started or stopped a stream."""

    was_streaming = _is_streaming(old_member)
    is_streaming = _is_streaming(new_member)
    if was_streaming == is_streaming:
        return StreamingChange.NO_CHANGE
    if was_streaming:
        return StreamingChange.STOPPED
    return StreamingChange.STARTED


__all__ = [
    "compare_streaming",
    "display_color",
    "display_hex_color",
    "display_role",
    "hoist_role",
]
