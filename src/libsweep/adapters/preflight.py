"""Precondition checks run before a destructive reconciliation.

Each check is independent and returns ``True`` to proceed. None of them carry
state the reconciliation engine needs.
"""

from __future__ import annotations

import logging
import sqlite3
import subprocess
from contextlib import closing
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Final, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from libsweep.domain.ports import AskYesNo

log = logging.getLogger(__name__)

PGREP_TIMEOUT: Final[float] = 5.0

CommandRunner: TypeAlias = "Callable[..., subprocess.CompletedProcess[bytes]]"


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ServiceRunningCheck:
    """Warn when the service owning the catalog is still running."""

    def __init__(
        self,
        service_name: str,
        ask: AskYesNo,
        *,
        runner: CommandRunner = subprocess.run,
    ) -> None:
        self.service_name = service_name
        self.ask = ask
        self.runner = runner

    def is_running(self) -> bool | None:
        """Return whether the service runs, or ``None`` when it cannot be told."""

        command: Sequence[str] = ("pgrep", "-x", self.service_name)
        try:
            completed = self.runner(
                list(command), capture_output=True, check=False, timeout=PGREP_TIMEOUT
            )
        except (OSError, subprocess.TimeoutExpired) as exc:
            log.warning("Could not check whether %s is running: %s", self.service_name, exc)
            return None
        if completed.returncode == 0:
            return True
        if completed.returncode == 1:
            return False
        log.warning(
            "pgrep exited with %s; state of %s unknown", completed.returncode, self.service_name
        )
        return None

    def __call__(self) -> bool:
        if not self.is_running():
            return True
        log.warning(
            "%s is running; it may rewrite the catalog while records are removed",
            self.service_name,
        )
        return self.ask(
            f"{self.service_name} is running. Continue anyway?",
            default=False,
        )


class BackupPreflight:
    """Offer to copy the catalog file aside before records are removed."""

    def __init__(
        self,
        catalog_path: Path,
        ask: AskYesNo,
        *,
        backup_dir: Path | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.catalog_path = catalog_path
        self.ask = ask
        self.backup_dir = backup_dir
        self.clock = clock

    def backup_path(self) -> Path:
        stamp = self.clock().strftime("%Y%m%dT%H%M%SZ")
        directory = self.backup_dir or self.catalog_path.parent
        return directory / f"{self.catalog_path.name}.{stamp}.bak"

    def create_backup(self) -> Path:
        """Copy the catalog with SQLite's online backup, including WAL content."""

        target = self.backup_path()
        target.parent.mkdir(parents=True, exist_ok=True)
        source_uri = f"{self.catalog_path.resolve().as_uri()}?mode=rw"
        try:
            with (
                closing(sqlite3.connect(source_uri, uri=True)) as source,
                closing(sqlite3.connect(target)) as destination,
            ):
                source.backup(destination)
        except sqlite3.Error:
            target.unlink(missing_ok=True)
            raise
        return target

    def __call__(self) -> bool:
        if not self.ask("Create a backup of the catalog before continuing?", default=True):
            log.info("Continuing without a catalog backup")
            return True
        try:
            target = self.create_backup()
        except (OSError, sqlite3.Error):
            log.exception("Catalog backup failed; aborting")
            return False
        log.info("Catalog backed up to %s", target)
        return True

