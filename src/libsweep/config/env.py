"""Environment variable loaders for configuration."""

from __future__ import annotations

import os

from .errors import ConfigurationError


def optional_env(name: str) -> str | None:
    """Return a stripped environment value, treating blank as unset."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def env_int(name: str, default: int) -> int:
    value = optional_env(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ConfigurationError(f"Expected integer for {name}, got: {value!r}") from exc


def env_float(name: str, default: float) -> float:
    value = optional_env(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigurationError(f"Expected number for {name}, got: {value!r}") from exc


def env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    """Split a comma separated value into its non-blank parts."""

    value = optional_env(name)
    if value is None:
        return default
    return tuple(part.strip() for part in value.split(",") if part.strip())
