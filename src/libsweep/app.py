"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from libsweep.adapters.filesystem import OsPathChecker
from libsweep.adapters.preflight import BackupPreflight, ServiceRunningCheck
from libsweep.adapters.sqlalchemy import SqlAlchemyCatalogStore, open_catalog_engine
from libsweep.config import PreflightConfig, ReconcileConfig
from libsweep.domain.errors import StoreUnreadable
from libsweep.domain.reconciliation import (
    ReconcileCatalog,
    ReconcileRequest,
    ReconcileResult,
    RunStatus,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy.engine import Engine

    from libsweep.config import CatalogConfig
    from libsweep.domain.ports import (
        AskYesNo,
        ConfirmDeletion,
        PathChecker,
        Preflight,
        ReportSink,
    )


log = getLogger(__name__)


def build_preflights(
    catalog: CatalogConfig,
    preflight: PreflightConfig,
    *,
    ask: AskYesNo,
) -> list[Preflight]:
    """Return the precondition checks for an apply-mode run, in order."""

    checks: list[Preflight] = [ServiceRunningCheck(preflight.service_name, ask)]
    catalog_path = catalog.sqlite_path()
    if catalog_path is None:
        log.info("Catalog is not a local SQLite file; skipping backup offer")
    else:
        checks.append(BackupPreflight(catalog_path, ask, backup_dir=preflight.backup_dir))
    return checks


def run_preflights(checks: Sequence[Preflight]) -> bool:
    for check in checks:
        if not check():
            log.info("Preflight %s declined; stopping before any change", type(check).__name__)
            return False
    return True


def reconcile_catalog(
    *,
    catalog: CatalogConfig,
    confirm: ConfirmDeletion,
    ask: AskYesNo,
    report: ReportSink | None = None,
    settings: ReconcileConfig | None = None,
    preflight: PreflightConfig | None = None,
    dry_run: bool = False,
    skip_preflight: bool = False,
    engine: Engine | None = None,
    checker: PathChecker | None = None,
) -> ReconcileResult:
    """Reconcile the configured catalog against the filesystem."""

    effective_settings = settings or ReconcileConfig()
    effective_preflight = preflight or PreflightConfig()

    try:
        effective_engine = engine or open_catalog_engine(catalog)
    except StoreUnreadable as exc:
        log.error("Catalog store unreadable: %s", exc)  # noqa: TRY400
        return ReconcileResult(status=RunStatus.STORE_UNREADABLE, error=str(exc))

    if not dry_run and not skip_preflight:
        checks = build_preflights(catalog, effective_preflight, ask=ask)
        if not run_preflights(checks):
            if engine is None:
                effective_engine.dispose()
            return ReconcileResult(status=RunStatus.ABORTED)

    policy = effective_settings.eligibility_policy()
    effective_checker = checker or OsPathChecker(
        base_dir=effective_settings.base_dir,
        timeout=effective_settings.check_timeout,
    )
    log.info(
        "Reconciling catalog %s: dry_run=%s, concurrency=%s",
        catalog.uri,
        dry_run,
        effective_settings.concurrency,
    )
    try:
        service = ReconcileCatalog(
            store=SqlAlchemyCatalogStore(effective_engine, policy=policy),
            checker=effective_checker,
            confirm=confirm,
            report=report,
            policy=policy,
            concurrency=effective_settings.concurrency,
        )
        return service.run(ReconcileRequest(dry_run=dry_run))
    finally:
        if engine is None:
            effective_engine.dispose()
