"""Filesystem existence checks."""

from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import Future
from typing import TYPE_CHECKING

from libsweep.domain.model import PathState

if TYPE_CHECKING:
    from pathlib import Path

log = logging.getLogger(__name__)


def _stat_into(target: str, outcome: Future[os.stat_result]) -> None:
    if not outcome.set_running_or_notify_cancel():
        return
    try:
        outcome.set_result(os.stat(target))
    except Exception as exc:  # noqa: BLE001
        outcome.set_exception(exc)


class OsPathChecker:
    """Existence check built on ``os.stat``.

    Symlinks are followed, so a broken link is absent. Errors other than
    "no such file" (permission denied on a parent, I/O errors, timeouts)
    are reported as ``INDETERMINATE``.

    With a ``timeout`` every stat runs on its own daemon thread and the clock
    starts once that thread is running. A stalled mount therefore only affects
    the paths below it, and a stat that never returns does not keep the
    interpreter from exiting.
    """

    def __init__(self, *, base_dir: Path | None = None, timeout: float | None = None) -> None:
        self.base_dir = base_dir
        self.timeout = timeout

    def resolve(self, path: str) -> str:
        if self.base_dir is not None and not os.path.isabs(path):
            return str(self.base_dir / path)
        return path

    def check(self, path: str) -> PathState:
        target = self.resolve(path)
        try:
            self._stat(target)
        except (FileNotFoundError, NotADirectoryError):
            return PathState.ABSENT
        except TimeoutError:
            log.debug("Existence check timed out after %ss: %s", self.timeout, target)
            return PathState.INDETERMINATE
        except (OSError, ValueError) as exc:
            log.debug("Existence check indeterminate for %s: %s", target, exc)
            return PathState.INDETERMINATE
        return PathState.PRESENT

    def exists(self, path: str) -> bool:
        return self.check(path) is PathState.PRESENT

    def _stat(self, target: str) -> None:
        if self.timeout is None:
            os.stat(target)
            return
        outcome: Future[os.stat_result] = Future()
        worker = threading.Thread(
            target=_stat_into,
            args=(target, outcome),
            name="libsweep-stat",
            daemon=True,
        )
        worker.start()
        outcome.result(timeout=self.timeout)


if TYPE_CHECKING:
    from libsweep.domain.ports import PathChecker

    _checker_check: PathChecker = OsPathChecker()
