"""Domain port definitions for adapters."""

from __future__ import annotations

from .client import ClientAccount, MemberFetcher, PlatformClient
from .messaging import (
    DirectPeer,
    Message,
    MessageListener,
    PromptTarget,
    Subscription,
    TextChannel,
)
from .settings import SettingsProvider

__all__ = [
    "ClientAccount",
    "DirectPeer",
    "MemberFetcher",
    "Message",
    "MessageListener",
    "PlatformClient",
    "PromptTarget",
    "SettingsProvider",
    "Subscription",
    "TextChannel",
]
