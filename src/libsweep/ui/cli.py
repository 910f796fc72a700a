from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, Final

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from libsweep.app import reconcile_catalog
from libsweep.config import (
    ConfigurationError,
    PreflightConfig,
    ReconcileConfig,
    configure_logging,
    get_catalog_config,
    get_preflight_config,
    get_reconcile_config,
)
from libsweep.domain.reconciliation import ReconcileResult, RunStatus
from libsweep.ui.prompts import ConsoleAsk, ConsoleConfirmation
from libsweep.ui.report import ConsoleReport

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

EXIT_OK: Final[int] = 0
EXIT_FATAL: Final[int] = 1
EXIT_USAGE: Final[int] = 2
EXIT_ABORTED: Final[int] = 3
EXIT_PARTIAL: Final[int] = 4
EXIT_INTERRUPTED: Final[int] = 130


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="libsweep",
        description="Find catalog entries whose media file is gone and offer to remove them",
    )
    location = parser.add_mutually_exclusive_group()
    location.add_argument(
        "--catalog",
        type=Path,
        help="Path to the SQLite catalog (defaults to LIBSWEEP_CATALOG_PATH or the server default)",
    )
    location.add_argument(
        "--database-uri",
        type=str,
        help="SQLAlchemy URI of the catalog, overriding --catalog",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report missing entries without prompting or deleting anything",
    )
    parser.add_argument(
        "--yes",
        action="store_true",
        help="Confirm deletion without prompting; other prompts take their default answer",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        help="Number of parallel existence checks (defaults to config)",
    )
    parser.add_argument(
        "--check-timeout",
        type=float,
        help="Seconds before a single existence check counts as indeterminate",
    )
    parser.add_argument(
        "--base-dir",
        type=Path,
        help="Directory that relative catalog paths are resolved against",
    )
    parser.add_argument(
        "--skip-preflight",
        action="store_true",
        help="Skip the running-service check and backup offer",
    )
    parser.add_argument(
        "--service-name",
        type=str,
        help="Process name of the service owning the catalog",
    )
    parser.add_argument(
        "--backup-dir",
        type=Path,
        help="Directory for catalog backups (defaults to next to the catalog)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log per-record diagnostics",
    )
    return parser.parse_args(list(argv))


def _reconcile_settings(args: argparse.Namespace) -> ReconcileConfig:
    settings = get_reconcile_config()
    overrides: dict[str, object] = {}
    if args.concurrency is not None:
        overrides["concurrency"] = args.concurrency
    if args.check_timeout is not None:
        overrides["check_timeout"] = args.check_timeout
    if args.base_dir is not None:
        overrides["base_dir"] = args.base_dir
    return replace(settings, **overrides) if overrides else settings


def _preflight_settings(args: argparse.Namespace) -> PreflightConfig:
    settings = get_preflight_config()
    overrides: dict[str, object] = {}
    if args.service_name:
        overrides["service_name"] = args.service_name
    if args.backup_dir is not None:
        overrides["backup_dir"] = args.backup_dir
    return replace(settings, **overrides) if overrides else settings


def exit_code_for(result: ReconcileResult) -> int:
    if result.status is RunStatus.STORE_UNREADABLE:
        return EXIT_FATAL
    if result.status is RunStatus.ABORTED:
        return EXIT_ABORTED
    if result.deletions is not None and result.deletions.failed:
        return EXIT_PARTIAL
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        catalog = get_catalog_config(path=parsed_args.catalog, uri=parsed_args.database_uri)
        settings = _reconcile_settings(parsed_args)
        preflight = _preflight_settings(parsed_args)
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(EXIT_USAGE)

    console = Console()
    ask = ConsoleAsk(console, assume_defaults=parsed_args.yes)
    try:
        result = reconcile_catalog(
            catalog=catalog,
            confirm=ConsoleConfirmation(ask, assume_yes=parsed_args.yes),
            ask=ask,
            report=ConsoleReport(console),
            settings=settings,
            preflight=preflight,
            dry_run=parsed_args.dry_run,
            skip_preflight=parsed_args.skip_preflight,
        )
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(EXIT_FATAL)

    if result.status is RunStatus.STORE_UNREADABLE:
        console.print(f"[bold red]Cannot read catalog:[/bold red] {escape(result.error or '')}")
    elif result.status is RunStatus.ABORTED:
        console.print("Aborted; no changes were made.")
    elif result.status is RunStatus.PLAN_REPORTED:
        console.print("Dry run; no changes were made.")

    code = exit_code_for(result)
    if code != EXIT_OK:
        sys.exit(code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(EXIT_INTERRUPTED)


def entrypoint() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    entrypoint()
