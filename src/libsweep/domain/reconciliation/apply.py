"""Mutation applier: delete planned records one at a time.

The applier trusts the plan as computed. It never re-checks existence, so a
file that reappears after classification still has its record deleted. It
performs no confirmation of its own; the caller gates the call.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from libsweep.domain.errors import CatalogWriteError
from libsweep.domain.model import DeletionOutcome, DeletionSummary

if TYPE_CHECKING:
    from collections.abc import Iterable

    from libsweep.domain.model import CatalogRecord
    from libsweep.domain.ports import CatalogStore

log = logging.getLogger(__name__)


def apply_deletions(store: CatalogStore, plan: Iterable[CatalogRecord]) -> DeletionSummary:
    """Delete each record in plan order, isolating per-record failures."""

    outcomes: list[DeletionOutcome] = []
    for record in plan:
        try:
            affected = store.delete(record.id)
        except CatalogWriteError as exc:
            log.warning("Failed to delete %s (%s): %s", record.id, record.name, exc)
            outcomes.append(DeletionOutcome(record=record, succeeded=False, error=str(exc)))
            continue

        if affected < 1:
            log.warning("Delete of %s (%s) removed no rows", record.id, record.name)
            outcomes.append(
                DeletionOutcome(record=record, succeeded=False, error="no rows removed")
            )
            continue

        log.debug("Deleted %s (%s)", record.id, record.name)
        outcomes.append(DeletionOutcome(record=record, succeeded=True))

    summary = DeletionSummary(outcomes=tuple(outcomes))
    log.info("Deletions attempted=%s, succeeded=%s", summary.attempted, summary.succeeded)
    return summary
