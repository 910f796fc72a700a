"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .logging import configure_logging
from .reconcile import (
    PreflightConfig,
    ReconcileConfig,
    get_preflight_config,
    get_reconcile_config,
)
from .storage import DEFAULT_CATALOG_PATH, CatalogConfig, get_catalog_config

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "CatalogConfig",
    "ConfigurationError",
    "PreflightConfig",
    "ReconcileConfig",
    "configure_logging",
    "get_catalog_config",
    "get_preflight_config",
    "get_reconcile_config",
]
