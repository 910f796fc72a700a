"""SQLAlchemy table metadata for the media-server catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Column, MetaData, String, Table, or_, select

if TYPE_CHECKING:
    from sqlalchemy import Select

    from libsweep.domain.model import EligibilityPolicy

metadata = MetaData()

# Only the columns reconciliation reads; the host application owns the schema.
catalog_items_table = Table(
    "TypedBaseItems",
    metadata,
    Column("guid", String, primary_key=True),
    Column("type", String, nullable=False),
    Column("Name", String),
    Column("Path", String),
)


def eligible_records_query(policy: EligibilityPolicy) -> Select[tuple[str, str, str, str]]:
    """Build the read statement for reconciliation-eligible records."""

    columns = catalog_items_table.c
    type_matches = (
        columns.type.endswith(suffix, autoescape=True) for suffix in policy.type_suffixes
    )
    stmt = (
        select(columns.guid, columns.type, columns.Name, columns.Path)
        .where(columns.Path.is_not(None))
        .where(columns.Path != "")
        .where(or_(*type_matches))
        .order_by(columns.type, columns.Name)
    )
    if policy.metadata_marker:
        stmt = stmt.where(~columns.Path.contains(policy.metadata_marker, autoescape=True))
    return stmt
