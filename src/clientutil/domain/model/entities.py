"""Plain value objects for platform entities.

These are deliberately thin: the platform binding owns the real objects, and the
resolution layer only needs ids and names. They are handy for tests, fixtures
and for callers that hydrate entities from cached payloads.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class User:
    id: str
    username: str
    discriminator: str = "0000"
    bot: bool = False

    @property
    def tag(self) -> str:
        return f"{self.username}#{self.discriminator}"


@dataclass(frozen=True, slots=True)
class Game:
    name: str
    streaming: bool = False


@dataclass(frozen=True, slots=True)
class Presence:
    game: Game | None = None


@dataclass(frozen=True, slots=True)
class Role:
    id: str
    name: str
    color: int = 0
    hoist: bool = False
    position: int = 0

    @property
    def hex_color(self) -> str:
        return f"#{self.color:06x}"


@dataclass(frozen=True, slots=True)
class Member:
    """A user's membership in a guild; shares the user's id."""

    user: User
    display_name: str = ""
    roles: tuple[Role, ...] = ()
    presence: Presence | None = field(default=None)

    def __post_init__(self) -> None:
        if not self.display_name:
            object.__setattr__(self, "display_name", self.user.username)

    @property
    def id(self) -> str:
        return self.user.id


@dataclass(frozen=True, slots=True)
class Channel:
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class Emoji:
    id: str
    name: str
    animated: bool = False


@dataclass(frozen=True, slots=True)
class Guild:
    id: str
    name: str
