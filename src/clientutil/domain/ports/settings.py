"""Ports for key/value settings storage."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SettingsProvider(Protocol):
    """Minimal settings store contract.

    ``table`` groups keys (typically one table per guild-level concern) and
    ``key`` addresses one value inside it. Implementations must be opened
    before use.
    """

    async def open(self) -> None: ...

    async def add(self, table: str, key: str, data: object) -> None: ...

    async def query(self, table: str, key: str) -> object | None: ...


__all__ = ["SettingsProvider"]
