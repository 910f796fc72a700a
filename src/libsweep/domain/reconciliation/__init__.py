"""Reconciliation core: cross-check catalog records against storage.

Flow for one run:
1) read eligible records from the catalog store
2) classify each record as found or missing via the path checker
3) report the deletion plan
4) on explicit confirmation, delete the missing records one at a time
"""

from __future__ import annotations

from .apply import apply_deletions
from .classify import classify
from .engine import ReconcileCatalog, ReconcileRequest, ReconcileResult
from .reader import read_eligible_records, row_to_record
from .state import InvalidTransition, RunState, RunStateMachine, RunStatus

__all__ = [
    "InvalidTransition",
    "ReconcileCatalog",
    "ReconcileRequest",
    "ReconcileResult",
    "RunState",
    "RunStateMachine",
    "RunStatus",
    "apply_deletions",
    "classify",
    "read_eligible_records",
    "row_to_record",
]
