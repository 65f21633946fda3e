"""Ports for the platform client's fetch surface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from clientutil.domain.model import MemberLike, Snowflake, UserLike


class ClientAccount(Protocol):
    @property
    def bot(self) -> bool: ...


@runtime_checkable
class PlatformClient(Protocol):
    """The logged-in client: who we are and how to fetch users."""

    @property
    def user(self) -> ClientAccount: ...

    async def fetch_user(self, user_id: Snowflake, cache: bool = True) -> UserLike: ...


@runtime_checkable
class MemberFetcher(Protocol):
    """A guild that can fetch one of its members."""

    async def fetch_member(self, user: UserLike, cache: bool = True) -> MemberLike: ...


__all__ = ["ClientAccount", "MemberFetcher", "PlatformClient"]
