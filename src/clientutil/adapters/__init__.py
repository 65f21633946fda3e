"""Adapters implementing the domain ports."""

from __future__ import annotations

from .memory import (
    InMemoryChannel,
    InMemoryMessage,
    InMemorySettingsProvider,
    InMemorySubscription,
    InMemoryUser,
)

__all__ = [
    "InMemoryChannel",
    "InMemoryMessage",
    "InMemorySettingsProvider",
    "InMemorySubscription",
    "InMemoryUser",
]
