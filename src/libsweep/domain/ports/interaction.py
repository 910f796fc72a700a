"""Ports for the collaborators that sit between the core and the user."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from libsweep.domain.model import ClassificationResult, DeletionSummary


@runtime_checkable
class ConfirmDeletion(Protocol):
    """Return the user's yes/no decision on a deletion plan."""

    def __call__(self, result: ClassificationResult) -> bool: ...


@runtime_checkable
class ReportSink(Protocol):
    """Receive structured results; formatting is entirely the sink's concern."""

    def plan_ready(self, result: ClassificationResult) -> None: ...

    def deletions_applied(self, summary: DeletionSummary) -> None: ...


@runtime_checkable
class Preflight(Protocol):
    """Precondition check run before the engine; ``False`` aborts the run."""

    def __call__(self) -> bool: ...


@runtime_checkable
class AskYesNo(Protocol):
    """Ask a yes/no question; empty input selects ``default``."""

    def __call__(self, question: str, *, default: bool) -> bool: ...
