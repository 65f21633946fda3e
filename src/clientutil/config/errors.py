"""Configuration error definitions."""

from __future__ import annotations

from clientutil.errors import ClientUtilError


class ConfigurationError(ClientUtilError):
    """Raised when configuration values are invalid."""
