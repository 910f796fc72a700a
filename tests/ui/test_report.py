from __future__ import annotations

import io

from rich.console import Console

from libsweep.domain.model import ClassificationResult, DeletionOutcome, DeletionSummary
from libsweep.ui.report import ConsoleReport
from tests.helpers.catalog import EPISODE, make_record


def _report() -> tuple[ConsoleReport, io.StringIO]:
    buffer = io.StringIO()
    return ConsoleReport(Console(file=buffer, width=200, color_system=None)), buffer


def test_plan_ready_all_present() -> None:
    report, buffer = _report()

    report.plan_ready(ClassificationResult(found=3))

    output = buffer.getvalue()
    assert "Found: 3" in output
    assert "Missing: 0" in output
    assert "All catalog entries are present on disk." in output


def test_plan_ready_lists_missing_records() -> None:
    report, buffer = _report()
    missing = (
        make_record("e1", "Pilot", type_tag=EPISODE, path="/tv/show/pilot.mkv"),
        make_record("m1", "Arrival"),
    )

    report.plan_ready(ClassificationResult(found=2, missing=missing, indeterminate=1))

    output = buffer.getvalue()
    assert "Missing: 2" in output
    assert "(checked 4)" in output
    assert "1 of the missing paths could not be checked" in output
    assert "Missing from disk" in output
    assert "Pilot" in output
    assert "Episode" in output
    assert "/tv/show/pilot.mkv" in output
    assert "Arrival" in output


def test_plan_ready_prints_names_literally() -> None:
    report, buffer = _report()

    report.plan_ready(ClassificationResult(found=0, missing=(make_record("x", "[bold]Odd[/bold]"),)))

    assert "[bold]Odd[/bold]" in buffer.getvalue()


def test_deletions_applied_summarises_failures() -> None:
    report, buffer = _report()
    summary = DeletionSummary(
        outcomes=(
            DeletionOutcome(record=make_record("ok", "Kept"), succeeded=True),
            DeletionOutcome(
                record=make_record("bad", "Stuck"), succeeded=False, error="database is locked"
            ),
        )
    )

    report.deletions_applied(summary)

    output = buffer.getvalue()
    assert "Failed bad Stuck: database is locked" in output
    assert "Deleted 1 of 2 attempted (1 failed)" in output
    assert "Kept" not in output


def test_deletions_applied_prints_ids_literally() -> None:
    report, buffer = _report()
    summary = DeletionSummary(
        outcomes=(
            DeletionOutcome(
                record=make_record("[red]id[/red]", "Stuck"), succeeded=False, error="locked"
            ),
        )
    )

    report.deletions_applied(summary)

    assert "Failed [red]id[/red] Stuck: locked" in buffer.getvalue()
