"""Exception hierarchy shared across clientutil."""

from __future__ import annotations


class ClientUtilError(Exception):
    """Base class for every error raised by clientutil."""


class MessageNotFoundError(ClientUtilError):
    """Raised when a message lookup by id comes back empty."""

    def __init__(self, message_id: str) -> None:
        super().__init__("Message was not found.")
        self.message_id = message_id


class ProviderNotOpenError(ClientUtilError):
    """Raised when a settings provider is used before ``open()``."""
