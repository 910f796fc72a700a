"""Catalog reader: turn raw store rows into eligible catalog records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from libsweep.domain.errors import RecordMalformed
from libsweep.domain.model import CatalogRecord, EligibilityPolicy

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from libsweep.domain.ports import CatalogStore

log = logging.getLogger(__name__)

ROW_WIDTH = 4


def row_to_record(row: Sequence[object]) -> CatalogRecord:
    """Convert one ``(id, type, name, path)`` row, raising ``RecordMalformed``."""

    if len(row) < ROW_WIDTH:
        raise RecordMalformed(f"Expected {ROW_WIDTH} fields, got {len(row)}: {row!r}")
    record_id, type_tag, name, path = row[:ROW_WIDTH]
    if not isinstance(record_id, str) or not record_id:
        raise RecordMalformed(f"Invalid record id: {record_id!r}")
    if not isinstance(type_tag, str) or not type_tag:
        raise RecordMalformed(f"Invalid type for {record_id}: {type_tag!r}")
    if not isinstance(path, str):
        raise RecordMalformed(f"Invalid path for {record_id}: {path!r}")
    if name is None:
        name = ""
    elif not isinstance(name, str):
        raise RecordMalformed(f"Invalid name for {record_id}: {name!r}")
    return CatalogRecord(id=record_id, type=type_tag, name=name, path=path)


def read_eligible_records(
    store: CatalogStore,
    *,
    policy: EligibilityPolicy | None = None,
) -> Iterator[CatalogRecord]:
    """Lazily yield the store's eligible records in store order.

    Malformed rows and rows the policy rejects are skipped; ``StoreUnreadable``
    from the store propagates to the caller.
    """

    effective_policy = policy or EligibilityPolicy()
    skipped = 0
    for row in store.iter_rows():
        try:
            record = row_to_record(row)
        except RecordMalformed as exc:
            skipped += 1
            log.debug("Skipping malformed row: %s", exc)
            continue
        if not effective_policy.is_eligible(record):
            skipped += 1
            log.debug("Skipping ineligible record %s (%s)", record.id, record.type)
            continue
        yield record
    if skipped:
        log.info("Skipped %s catalog rows that were malformed or ineligible", skipped)
