"""Domain port definitions for adapters."""

from __future__ import annotations

from .catalog import CatalogStore
from .filesystem import PathChecker
from .interaction import AskYesNo, ConfirmDeletion, Preflight, ReportSink

__all__ = [
    "AskYesNo",
    "CatalogStore",
    "ConfirmDeletion",
    "PathChecker",
    "Preflight",
    "ReportSink",
]
