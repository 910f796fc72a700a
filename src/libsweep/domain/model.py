"""Value objects shared by the reconciliation core and its adapters."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

DEFAULT_TYPE_SUFFIXES: tuple[str, ...] = (".Episode", ".Movie")
DEFAULT_METADATA_MARKER = "%MetadataPath%"


@dataclass(frozen=True, slots=True)
class CatalogRecord:
    """Transient, read-only copy of one catalog row."""

    id: str
    type: str
    name: str
    path: str

    @property
    def sort_key(self) -> tuple[str, str]:
        return (self.type, self.name)


@dataclass(frozen=True, slots=True)
class EligibilityPolicy:
    """Which catalog rows take part in reconciliation."""

    type_suffixes: tuple[str, ...] = DEFAULT_TYPE_SUFFIXES
    metadata_marker: str = DEFAULT_METADATA_MARKER

    def __post_init__(self) -> None:
        if not self.type_suffixes or not all(self.type_suffixes):
            raise ValueError("Eligibility policy needs at least one non-empty type suffix")

    def is_eligible(self, record: CatalogRecord) -> bool:
        """Apply the catalog query's filter; like SQL ``LIKE`` it ignores case."""

        if not record.path:
            return False
        if self.metadata_marker and self.metadata_marker.lower() in record.path.lower():
            return False
        type_tag = record.type.lower()
        return any(type_tag.endswith(suffix.lower()) for suffix in self.type_suffixes)


class PathState(StrEnum):
    """Result of a single existence check."""

    PRESENT = "present"
    ABSENT = "absent"
    INDETERMINATE = "indeterminate"


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Partition of eligible records into found and missing.

    ``missing`` is the deletion plan, ordered by ``(type, name)``.
    ``indeterminate`` counts the missing records whose check raised an error
    rather than reporting absence.
    """

    found: int
    missing: tuple[CatalogRecord, ...] = ()
    indeterminate: int = 0

    @property
    def total(self) -> int:
        return self.found + len(self.missing)

    @property
    def all_present(self) -> bool:
        return not self.missing


@dataclass(frozen=True, slots=True)
class DeletionOutcome:
    record: CatalogRecord
    succeeded: bool
    error: str | None = None


@dataclass(frozen=True, slots=True)
class DeletionSummary:
    """Per-record outcomes of one mutation pass, in plan order."""

    outcomes: tuple[DeletionOutcome, ...] = field(default_factory=tuple)

    @property
    def attempted(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failed(self) -> int:
        return self.attempted - self.succeeded

    @property
    def failed_records(self) -> Sequence[CatalogRecord]:
        return [outcome.record for outcome in self.outcomes if not outcome.succeeded]
