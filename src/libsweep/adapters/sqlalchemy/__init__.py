"""SQLAlchemy adapter package for libsweep."""

from __future__ import annotations

from .catalog_store import SqlAlchemyCatalogStore, open_catalog_engine
from .mappings import catalog_items_table, eligible_records_query, metadata

__all__ = [
    "SqlAlchemyCatalogStore",
    "catalog_items_table",
    "eligible_records_query",
    "metadata",
    "open_catalog_engine",
]
