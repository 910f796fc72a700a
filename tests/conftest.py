from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine, insert

from libsweep.adapters.sqlalchemy import catalog_items_table, metadata

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence
    from pathlib import Path

    from sqlalchemy.engine import Engine


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "LIBSWEEP_DATABASE_URI",
        "LIBSWEEP_CATALOG_PATH",
        "LIBSWEEP_CONCURRENCY",
        "LIBSWEEP_CHECK_TIMEOUT",
        "LIBSWEEP_TYPE_SUFFIXES",
        "LIBSWEEP_METADATA_MARKER",
        "LIBSWEEP_BASE_DIR",
        "LIBSWEEP_SERVICE_NAME",
        "LIBSWEEP_BACKUP_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    path = tmp_path / "library.db"
    engine = create_engine(f"sqlite+pysqlite:///{path}")
    metadata.create_all(engine)
    engine.dispose()
    return path


@pytest.fixture
def catalog_engine(catalog_path: Path) -> Iterator[Engine]:
    engine = create_engine(f"sqlite+pysqlite:///{catalog_path}")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def insert_rows(catalog_engine: Engine) -> Callable[[Sequence[Sequence[object]]], None]:
    def _insert(rows: Sequence[Sequence[object]]) -> None:
        with catalog_engine.begin() as connection:
            connection.execute(
                insert(catalog_items_table),
                [
                    {"guid": guid, "type": type_tag, "Name": name, "Path": path}
                    for guid, type_tag, name, path in rows
                ],
            )

    return _insert
