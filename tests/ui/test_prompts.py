from __future__ import annotations

import io

import pytest
from rich.console import Console

from libsweep.domain.model import ClassificationResult
from libsweep.ui.prompts import ConsoleAsk, ConsoleConfirmation, ask_yes_no
from tests.helpers.catalog import ScriptedAsk, make_record


def _quiet_console() -> Console:
    return Console(file=io.StringIO())


@pytest.mark.parametrize("default", [True, False])
def test_empty_answer_selects_default(default: bool) -> None:
    answer = ask_yes_no(
        "Continue?", default=default, console=_quiet_console(), stream=io.StringIO("\n")
    )

    assert answer is default


@pytest.mark.parametrize("default", [True, False])
def test_end_of_input_selects_default(default: bool) -> None:
    answer = ask_yes_no(
        "Continue?", default=default, console=_quiet_console(), stream=io.StringIO("")
    )

    assert answer is default


@pytest.mark.parametrize(("reply", "expected"), [("y\n", True), ("n\n", False), ("Y\n", True)])
def test_explicit_answer_wins(reply: str, expected: bool) -> None:
    answer = ask_yes_no(
        "Continue?", default=not expected, console=_quiet_console(), stream=io.StringIO(reply)
    )

    assert answer is expected


def test_console_ask_assume_defaults_never_prompts() -> None:
    ask = ConsoleAsk(_quiet_console(), assume_defaults=True)

    assert ask("Create a backup?", default=True) is True
    assert ask("Service is running. Continue anyway?", default=False) is False


def test_confirmation_asks_with_no_as_default() -> None:
    ask = ScriptedAsk()
    confirm = ConsoleConfirmation(ask)
    result = ClassificationResult(found=1, missing=(make_record("a"), make_record("b")))

    assert confirm(result) is False
    assert ask.questions == [("Delete 2 missing records from the catalog?", False)]


def test_confirmation_singular_wording() -> None:
    ask = ScriptedAsk(True)
    confirm = ConsoleConfirmation(ask)

    assert confirm(ClassificationResult(found=0, missing=(make_record("a"),))) is True
    assert ask.questions == [("Delete 1 missing record from the catalog?", False)]


def test_confirmation_assume_yes_skips_question() -> None:
    ask = ScriptedAsk()
    confirm = ConsoleConfirmation(ask, assume_yes=True)

    assert confirm(ClassificationResult(found=0, missing=(make_record("a"),))) is True
    assert ask.questions == []
