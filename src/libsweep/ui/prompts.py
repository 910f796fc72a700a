"""Yes/no prompts with a fixed default for empty input."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.prompt import Confirm

if TYPE_CHECKING:
    from typing import TextIO

    from rich.console import Console

    from libsweep.domain.model import ClassificationResult
    from libsweep.domain.ports import AskYesNo


def ask_yes_no(
    question: str,
    *,
    default: bool,
    console: Console | None = None,
    stream: TextIO | None = None,
) -> bool:
    """Ask ``question``; pressing enter (or end of input) selects ``default``."""

    try:
        return Confirm.ask(question, default=default, console=console, stream=stream)
    except EOFError:
        return default


class ConsoleAsk:
    """``AskYesNo`` bound to a console; ``assume_defaults`` never prompts."""

    def __init__(self, console: Console | None = None, *, assume_defaults: bool = False) -> None:
        self.console = console
        self.assume_defaults = assume_defaults

    def __call__(self, question: str, *, default: bool) -> bool:
        if self.assume_defaults:
            return default
        return ask_yes_no(question, default=default, console=self.console)


class ConsoleConfirmation:
    """Deletion gateway: destructive, so an empty answer means no."""

    def __init__(self, ask: AskYesNo, *, assume_yes: bool = False) -> None:
        self.ask = ask
        self.assume_yes = assume_yes

    def __call__(self, result: ClassificationResult) -> bool:
        if self.assume_yes:
            return True
        count = len(result.missing)
        noun = "record" if count == 1 else "records"
        return self.ask(f"Delete {count} missing {noun} from the catalog?", default=False)
