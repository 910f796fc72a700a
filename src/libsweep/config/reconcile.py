"""Reconciliation and preflight defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from libsweep.domain.model import (
    DEFAULT_METADATA_MARKER,
    DEFAULT_TYPE_SUFFIXES,
    EligibilityPolicy,
)

from .env import env_float, env_int, env_list, optional_env
from .errors import ConfigurationError

DEFAULT_CONCURRENCY: Final[int] = 8
DEFAULT_CHECK_TIMEOUT: Final[float] = 10.0
DEFAULT_SERVICE_NAME: Final[str] = "jellyfin"


@dataclass(frozen=True, slots=True)
class ReconcileConfig:
    concurrency: int = DEFAULT_CONCURRENCY
    check_timeout: float = DEFAULT_CHECK_TIMEOUT
    type_suffixes: tuple[str, ...] = DEFAULT_TYPE_SUFFIXES
    metadata_marker: str = DEFAULT_METADATA_MARKER
    base_dir: Path | None = None

    def __post_init__(self) -> None:
        if self.concurrency < 1:
            raise ConfigurationError("Concurrency must be at least 1")
        if self.check_timeout <= 0:
            raise ConfigurationError("Check timeout must be positive")
        if not self.type_suffixes:
            raise ConfigurationError("At least one eligible type suffix is required")

    def eligibility_policy(self) -> EligibilityPolicy:
        return EligibilityPolicy(
            type_suffixes=self.type_suffixes,
            metadata_marker=self.metadata_marker,
        )


@dataclass(frozen=True, slots=True)
class PreflightConfig:
    service_name: str = DEFAULT_SERVICE_NAME
    backup_dir: Path | None = None


def get_reconcile_config() -> ReconcileConfig:
    base_dir = optional_env("LIBSWEEP_BASE_DIR")
    return ReconcileConfig(
        concurrency=env_int("LIBSWEEP_CONCURRENCY", DEFAULT_CONCURRENCY),
        check_timeout=env_float("LIBSWEEP_CHECK_TIMEOUT", DEFAULT_CHECK_TIMEOUT),
        type_suffixes=env_list("LIBSWEEP_TYPE_SUFFIXES", DEFAULT_TYPE_SUFFIXES),
        metadata_marker=optional_env("LIBSWEEP_METADATA_MARKER") or DEFAULT_METADATA_MARKER,
        base_dir=Path(base_dir).expanduser() if base_dir else None,
    )


def get_preflight_config() -> PreflightConfig:
    backup_dir = optional_env("LIBSWEEP_BACKUP_DIR")
    return PreflightConfig(
        service_name=optional_env("LIBSWEEP_SERVICE_NAME") or DEFAULT_SERVICE_NAME,
        backup_dir=Path(backup_dir).expanduser() if backup_dir else None,
    )
