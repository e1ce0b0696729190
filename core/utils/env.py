"""Common environment helpers used across the server."""

from __future__ import annotations

import os

from core.exceptions import ConfigurationError

__all__ = ["get_env", "get_float_env"]


def get_env(key: str, default: str | None = None, *, required: bool = False) -> str | None:
    """Return an environment variable and optionally enforce its presence."""

    value = os.getenv(key, default)
    if required and value is None:
        raise ConfigurationError(f"Required environment variable {key} not set", key=key)
    return value


def get_float_env(key: str, default: float) -> float:
    """Return a positive float environment variable, falling back to ``default`` when unset."""

    raw = (get_env(key) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be a number, got {raw!r}", key=key) from exc
    if value <= 0:
        raise ConfigurationError(f"{key} must be greater than zero, got {raw!r}", key=key)
    return value
