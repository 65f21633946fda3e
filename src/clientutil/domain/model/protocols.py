"""Structural contracts for platform entities.

Resolution and display helpers only read attributes, so any object exposing the
same shape works, whether it is one of the dataclasses in
:mod:`clientutil.domain.model.entities` or a platform binding's own type.
Identifiers may be strings or integers; they are compared through ``str()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable


type Snowflake = str | int


@runtime_checkable
class Identified(Protocol):
    @property
    def id(self) -> Snowflake: ...


@runtime_checkable
class Named(Identified, Protocol):
    @property
    def name(self) -> str: ...


@runtime_checkable
class UserLike(Identified, Protocol):
    @property
    def username(self) -> str: ...

    @property
    def discriminator(self) -> str: ...


class GameLike(Protocol):
    @property
    def streaming(self) -> bool: ...


class PresenceLike(Protocol):
    @property
    def game(self) -> GameLike | None: ...


@runtime_checkable
class RoleLike(Named, Protocol):
    @property
    def color(self) -> int: ...

    @property
    def hoist(self) -> bool: ...

    @property
    def position(self) -> int: ...


@runtime_checkable
class MemberLike(Identified, Protocol):
    @property
    def user(self) -> UserLike: ...

    @property
    def display_name(self) -> str: ...

    @property
    def roles(self) -> Iterable[RoleLike]: ...

    @property
    def presence(self) -> PresenceLike | None: ...


__all__ = [
    "GameLike",
    "Identified",
    "MemberLike",
    "Named",
    "PresenceLike",
    "RoleLike",
    "Snowflake",
    "UserLike",
]
