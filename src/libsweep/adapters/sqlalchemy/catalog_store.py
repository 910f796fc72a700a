"""Catalog store backed by a SQLAlchemy engine."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import create_engine, delete
from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from libsweep.domain.errors import CatalogWriteError, StoreUnreadable
from libsweep.domain.model import EligibilityPolicy

from .mappings import catalog_items_table, eligible_records_query

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine

    from libsweep.config import CatalogConfig

log = logging.getLogger(__name__)


def _diagnostic(exc: SQLAlchemyError) -> str:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def open_catalog_engine(config: CatalogConfig) -> Engine:
    """Create an engine for an existing catalog, never creating the database."""

    sqlite_path = config.sqlite_path()
    if sqlite_path is not None and not sqlite_path.is_file():
        raise StoreUnreadable(f"Catalog database not found: {sqlite_path}")
    try:
        return create_engine(config.uri)
    except (SQLAlchemyError, ImportError) as exc:
        raise StoreUnreadable(f"Cannot open catalog {config.uri}: {exc}") from exc


class SqlAlchemyCatalogStore:
    """Run the eligibility query and single-row deletes against the catalog."""

    def __init__(self, engine: Engine, *, policy: EligibilityPolicy | None = None) -> None:
        self.engine = engine
        self.policy = policy or EligibilityPolicy()

    def iter_rows(self) -> Iterator[tuple[object, ...]]:
        stmt = eligible_records_query(self.policy)
        try:
            with self.engine.connect() as connection:
                for row in connection.execute(stmt):
                    yield tuple(row)
        except SQLAlchemyError as exc:
            raise StoreUnreadable(_diagnostic(exc)) from exc

    def delete(self, record_id: str) -> int:
        stmt = delete(catalog_items_table).where(catalog_items_table.c.guid == record_id)
        try:
            with self.engine.begin() as connection:
                affected = connection.execute(stmt).rowcount
        except SQLAlchemyError as exc:
            raise CatalogWriteError(record_id, _diagnostic(exc)) from exc
        log.debug("Delete %s affected %s rows", record_id, affected)
        return affected


if TYPE_CHECKING:
    from typing import cast

    from libsweep.domain.ports import CatalogStore

    _store_check: CatalogStore = SqlAlchemyCatalogStore(cast("Engine", object()))
