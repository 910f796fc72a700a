"""Domain error definitions."""

from __future__ import annotations


class LibsweepError(RuntimeError):
    """Base error type."""


class StoreUnreadable(LibsweepError):
    """Raised when the catalog store cannot be queried at all."""


class RecordMalformed(LibsweepError):
    """Raised when a catalog row does not have the expected shape."""


class CatalogWriteError(LibsweepError):
    """Raised by a catalog store when a single delete statement fails."""

    def __init__(self, record_id: str, message: str) -> None:
        super().__init__(f"Delete failed for {record_id}: {message}")
        self.record_id = record_id
