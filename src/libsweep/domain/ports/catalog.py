"""Port for the relational catalog store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


@runtime_checkable
class CatalogStore(Protocol):
    """The two statement shapes the reconciliation core needs.

    ``iter_rows`` runs the eligibility query and yields raw ``(id, type, name,
    path)`` rows ordered by ``(type, name)``; it raises ``StoreUnreadable`` when
    the query cannot execute. ``delete`` removes one row keyed by id and returns
    the number of rows the store reports as affected; it raises
    ``CatalogWriteError`` when the statement fails.
    """

    def iter_rows(self) -> Iterable[Sequence[object]]: ...

    def delete(self, record_id: str) -> int: ...
