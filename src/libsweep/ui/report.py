"""Render reconciliation results to the terminal."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from libsweep.domain.model import ClassificationResult, DeletionSummary


class ConsoleReport:
    """``ReportSink`` that prints counts, the deletion plan and a summary."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def plan_ready(self, result: ClassificationResult) -> None:
        self.console.print(
            f"[green]Found[/green]: {result.found}  "
            f"[red]Missing[/red]: {len(result.missing)}  "
            f"(checked {result.total})"
        )
        if result.all_present:
            self.console.print("[bold green]All catalog entries are present on disk.[/bold green]")
            return
        if result.indeterminate:
            self.console.print(
                f"[yellow]{result.indeterminate} of the missing paths could not be checked "
                "(permission or I/O error) and are treated as missing.[/yellow]"
            )
        self.console.print(self._missing_table(result))

    def deletions_applied(self, summary: DeletionSummary) -> None:
        for outcome in summary.outcomes:
            if outcome.succeeded:
                continue
            self.console.print(
                f"[red]Failed[/red] {escape(outcome.record.id)} "
                f"{escape(outcome.record.name)}: {escape(outcome.error or '')}"
            )
        style = "green" if summary.failed == 0 else "yellow"
        self.console.print(
            f"[{style}]Deleted {summary.succeeded} of {summary.attempted} attempted "
            f"({summary.failed} failed)[/{style}]"
        )

    @staticmethod
    def _missing_table(result: ClassificationResult) -> Table:
        table = Table(title="Missing from disk")
        table.add_column("Id", style="dim", no_wrap=True)
        table.add_column("Type")
        table.add_column("Name", style="bold")
        table.add_column("Path", overflow="fold")
        for record in result.missing:
            table.add_row(
                escape(record.id),
                record.type.rsplit(".", 1)[-1],
                escape(record.name),
                escape(record.path),
            )
        return table


if TYPE_CHECKING:
    from libsweep.domain.ports import ReportSink

    _report_check: ReportSink = ConsoleReport()
