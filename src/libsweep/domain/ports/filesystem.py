"""Port for the filesystem existence primitive."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from libsweep.domain.model import PathState


@runtime_checkable
class PathChecker(Protocol):
    """Report whether a path exists, never raising for a bad path."""

    def check(self, path: str) -> PathState: ...
