"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError


def optional_env_var(name: str) -> str | None:
    """Return the stripped value of ``name`` or ``None`` when unset/blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def positive_float_env_var(name: str, *, default: float) -> float:
    """Read ``name`` as a strictly positive float, falling back to ``default``."""

    raw = optional_env_var(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigurationError(f"{name} must be positive, got {raw!r}")
    return value
