"""Run state machine for one reconciliation invocation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final


class RunState(StrEnum):
    IDLE = "idle"
    READING = "reading"
    CLASSIFYING = "classifying"
    REPORTING = "reporting"
    AWAITING_CONFIRMATION = "awaiting_confirmation"
    APPLYING = "applying"
    REPORTED = "reported"
    ABORTED = "aborted"
    FAILED = "failed"


class RunStatus(StrEnum):
    """Terminal outcome of a run."""

    ALL_PRESENT = "all_present"
    PLAN_REPORTED = "plan_reported"
    APPLIED = "applied"
    ABORTED = "aborted"
    STORE_UNREADABLE = "store_unreadable"


TRANSITIONS: Final[dict[RunState, frozenset[RunState]]] = {
    RunState.IDLE: frozenset({RunState.READING}),
    RunState.READING: frozenset({RunState.CLASSIFYING, RunState.FAILED}),
    RunState.CLASSIFYING: frozenset({RunState.REPORTING}),
    RunState.REPORTING: frozenset({RunState.REPORTED, RunState.AWAITING_CONFIRMATION}),
    RunState.AWAITING_CONFIRMATION: frozenset({RunState.APPLYING, RunState.ABORTED}),
    RunState.APPLYING: frozenset({RunState.REPORTED}),
    RunState.REPORTED: frozenset(),
    RunState.ABORTED: frozenset(),
    RunState.FAILED: frozenset(),
}

TERMINAL_STATES: Final[frozenset[RunState]] = frozenset(
    state for state, targets in TRANSITIONS.items() if not targets
)


class InvalidTransition(RuntimeError):
    """Raised when a run tries to move to a state it cannot reach."""


@dataclass(slots=True)
class RunStateMachine:
    state: RunState = RunState.IDLE
    _history: list[RunState] = field(default_factory=lambda: [RunState.IDLE])

    @property
    def history(self) -> tuple[RunState, ...]:
        return tuple(self._history)

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def advance(self, target: RunState) -> None:
        if target not in TRANSITIONS[self.state]:
            raise InvalidTransition(f"Cannot move from {self.state} to {target}")
        self.state = target
        self._history.append(target)
