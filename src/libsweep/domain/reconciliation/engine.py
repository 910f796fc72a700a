"""Orchestrator for one reconciliation run.

The engine composes the reader, classifier and applier behind injected ports.
Confirmation and reporting are collaborators: the engine hands them structured
results and receives a plain boolean decision back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from libsweep.domain.errors import StoreUnreadable
from libsweep.domain.model import EligibilityPolicy

from .apply import apply_deletions
from .classify import classify
from .reader import read_eligible_records
from .state import RunState, RunStateMachine, RunStatus

if TYPE_CHECKING:
    from libsweep.domain.model import ClassificationResult, DeletionSummary
    from libsweep.domain.ports import CatalogStore, ConfirmDeletion, PathChecker, ReportSink

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReconcileRequest:
    """Per-run options. ``dry_run`` stops after the plan is reported."""

    dry_run: bool = False


@dataclass(frozen=True, slots=True)
class ReconcileResult:
    status: RunStatus
    classification: ClassificationResult | None = None
    deletions: DeletionSummary | None = None
    error: str | None = None
    states: tuple[RunState, ...] = ()


@dataclass(slots=True)
class ReconcileCatalog:
    """Read, classify, report and (on confirmation) apply a deletion plan."""

    store: CatalogStore
    checker: PathChecker
    confirm: ConfirmDeletion
    report: ReportSink | None = None
    policy: EligibilityPolicy = field(default_factory=EligibilityPolicy)
    concurrency: int = 1

    def run(self, request: ReconcileRequest | None = None) -> ReconcileResult:
        effective = request or ReconcileRequest()
        machine = RunStateMachine()
        log.info("Starting reconciliation (dry_run=%s)", effective.dry_run)

        machine.advance(RunState.READING)
        try:
            records = list(read_eligible_records(self.store, policy=self.policy))
        except StoreUnreadable as exc:
            log.error("Catalog store unreadable: %s", exc)  # noqa: TRY400
            machine.advance(RunState.FAILED)
            return ReconcileResult(
                status=RunStatus.STORE_UNREADABLE,
                error=str(exc),
                states=machine.history,
            )

        machine.advance(RunState.CLASSIFYING)
        classification = classify(records, self.checker, concurrency=self.concurrency)

        machine.advance(RunState.REPORTING)
        if self.report is not None:
            self.report.plan_ready(classification)

        if classification.all_present:
            machine.advance(RunState.REPORTED)
            return self._finish(machine, RunStatus.ALL_PRESENT, classification)

        if effective.dry_run:
            machine.advance(RunState.REPORTED)
            return self._finish(machine, RunStatus.PLAN_REPORTED, classification)

        machine.advance(RunState.AWAITING_CONFIRMATION)
        if not self.confirm(classification):
            machine.advance(RunState.ABORTED)
            log.info("Deletion declined; catalog left untouched")
            return self._finish(machine, RunStatus.ABORTED, classification)

        machine.advance(RunState.APPLYING)
        summary = apply_deletions(self.store, classification.missing)
        machine.advance(RunState.REPORTED)
        if self.report is not None:
            self.report.deletions_applied(summary)
        return self._finish(machine, RunStatus.APPLIED, classification, summary)

    @staticmethod
    def _finish(
        machine: RunStateMachine,
        status: RunStatus,
        classification: ClassificationResult,
        deletions: DeletionSummary | None = None,
    ) -> ReconcileResult:
        log.info("Reconciliation finished: %s", status)
        return ReconcileResult(
            status=status,
            classification=classification,
            deletions=deletions,
            states=machine.history,
        )
