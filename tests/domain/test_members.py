from __future__ import annotations

from clientutil.domain.members import (
    compare_streaming,
    display_color,
    display_hex_color,
    display_role,
    hoist_role,
)
from clientutil.domain.model import Game, Member, Presence, Role, StreamingChange, User


def _member(*roles: Role, presence: Presence | None = None) -> Member:
    return Member(user=User(id="1", username="dana"), roles=roles, presence=presence)


def test_display_role_is_highest_coloured_role(roles: dict[str, Role]) -> None:
    member = _member(*roles.values())

    assert display_role(member) == roles["10"]
    assert display_color(member) == 0xFF0000
    assert display_hex_color(member) == "#ff0000"


def test_display_helpers_without_coloured_roles(roles: dict[str, Role]) -> None:
    member = _member(roles["11"])

    assert display_role(member) is None
    assert display_color(member) == 0
    assert display_hex_color(member) == "#000000"


def test_hoist_role_is_highest_hoisted_role(roles: dict[str, Role]) -> None:
    assert hoist_role(_member(*roles.values())) == roles["9"]
    assert hoist_role(_member(roles["10"])) is None


def test_hoist_role_prefers_higher_position() -> None:
    low = Role(id="1", name="low", hoist=True, position=1)
    high = Role(id="2", name="high", hoist=True, position=3)

    assert hoist_role(_member(low, high)) == high


def test_compare_streaming() -> None:
    idle = _member()
    playing = _member(presence=Presence(game=Game(name="chess")))
    streaming = _member(presence=Presence(game=Game(name="chess", streaming=True)))

    assert compare_streaming(idle, playing) is StreamingChange.NO_CHANGE
    assert compare_streaming(streaming, streaming) is StreamingChange.NO_CHANGE
    assert compare_streaming(streaming, playing) is StreamingChange.STOPPED
    assert compare_streaming(idle, streaming) is StreamingChange.STARTED
    assert compare_streaming(idle, streaming) == 2
