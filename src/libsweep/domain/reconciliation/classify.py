"""Partition catalog records into found and missing."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import TYPE_CHECKING

from libsweep.domain.model import ClassificationResult, PathState

if TYPE_CHECKING:
    from collections.abc import Iterable

    from libsweep.domain.model import CatalogRecord
    from libsweep.domain.ports import PathChecker

log = logging.getLogger(__name__)


def _check(checker: PathChecker, record: CatalogRecord) -> PathState:
    try:
        return checker.check(record.path)
    except (OSError, ValueError) as exc:
        log.debug("Existence check for %s raised: %s", record.path, exc)
        return PathState.INDETERMINATE


def _check_all(
    records: list[CatalogRecord],
    checker: PathChecker,
    concurrency: int,
) -> list[PathState]:
    if concurrency == 1 or len(records) <= 1:
        return [_check(checker, record) for record in records]

    states: dict[int, PathState] = {}
    workers = min(concurrency, len(records))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="libsweep-check") as executor:
        futures = {
            executor.submit(_check, checker, record): index for index, record in enumerate(records)
        }
        for future in as_completed(futures):
            states[futures[future]] = future.result()
    return [states[index] for index in range(len(records))]


def classify(
    records: Iterable[CatalogRecord],
    checker: PathChecker,
    *,
    concurrency: int = 1,
) -> ClassificationResult:
    """Check every record once and build the ordered deletion plan.

    Existence is the sole criterion: directories, empty files and unreadable
    files all count as found. Indeterminate checks count as missing. The
    missing list is sorted by ``(type, name)`` with the record id as tie-break,
    so completion order of concurrent checks never shows in the result.
    """

    if concurrency < 1:
        raise ValueError("Concurrency must be at least 1")

    pending = list(records)
    states = _check_all(pending, checker, concurrency)

    found = 0
    indeterminate = 0
    missing: list[CatalogRecord] = []
    for record, state in zip(pending, states, strict=True):
        if state is PathState.PRESENT:
            found += 1
            continue
        if state is PathState.INDETERMINATE:
            indeterminate += 1
        log.debug("Missing (%s): %s -> %s", state, record.id, record.path)
        missing.append(record)

    missing.sort(key=lambda record: (*record.sort_key, record.id))
    log.info(
        "Classified %s records: found=%s, missing=%s (indeterminate=%s)",
        len(pending),
        found,
        len(missing),
        indeterminate,
    )
    return ClassificationResult(found=found, missing=tuple(missing), indeterminate=indeterminate)
