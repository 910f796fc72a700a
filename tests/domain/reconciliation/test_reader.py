from __future__ import annotations

import logging

import pytest

from libsweep.domain.errors import RecordMalformed, StoreUnreadable
from libsweep.domain.model import EligibilityPolicy
from libsweep.domain.reconciliation import read_eligible_records, row_to_record
from tests.helpers.catalog import EPISODE, MOVIE, SERIES, FakeCatalogStore, make_record


def test_row_to_record_maps_fields() -> None:
    record = row_to_record(("id-1", MOVIE, "Film", "/media/film.mkv"))

    assert record == make_record("id-1", "Film", path="/media/film.mkv")


def test_row_to_record_treats_null_name_as_empty() -> None:
    assert row_to_record(("id-1", MOVIE, None, "/media/film.mkv")).name == ""


@pytest.mark.parametrize(
    "row",
    [
        ("id-1", MOVIE, "Film"),
        (),
        (None, MOVIE, "Film", "/media/film.mkv"),
        ("id-1", None, "Film", "/media/film.mkv"),
        ("id-1", MOVIE, "Film", None),
        ("id-1", MOVIE, 42, "/media/film.mkv"),
    ],
)
def test_row_to_record_rejects_malformed_rows(row: tuple[object, ...]) -> None:
    with pytest.raises(RecordMalformed):
        row_to_record(row)


def test_read_skips_malformed_rows_and_keeps_the_rest(caplog: pytest.LogCaptureFixture) -> None:
    store = FakeCatalogStore(
        [
            ("a", MOVIE, "Alpha", "/media/a.mkv"),
            ("short", MOVIE),
            ("b", EPISODE, "Beta", "/media/b.mkv"),
        ]
    )

    with caplog.at_level(logging.DEBUG, logger="libsweep.domain.reconciliation.reader"):
        records = list(read_eligible_records(store))

    assert [record.id for record in records] == ["a", "b"]
    assert any("malformed" in message for message in caplog.messages)


def test_read_enforces_eligibility_even_if_store_does_not() -> None:
    store = FakeCatalogStore(
        [
            ("series", SERIES, "Show", "/media/show"),
            ("meta", MOVIE, "Poster", "%MetadataPath%/poster.jpg"),
            ("empty", MOVIE, "Nothing", ""),
            ("ok", MOVIE, "Film", "/media/film.mkv"),
        ]
    )

    records = list(read_eligible_records(store))

    assert [record.id for record in records] == ["ok"]


def test_read_uses_custom_policy() -> None:
    store = FakeCatalogStore([("s", SERIES, "Show", "/media/show")])
    policy = EligibilityPolicy(type_suffixes=(".Series",))

    assert [record.id for record in read_eligible_records(store, policy=policy)] == ["s"]


def test_read_is_lazy_and_propagates_store_unreadable() -> None:
    store = FakeCatalogStore(unreadable="file is not a database")

    records = read_eligible_records(store)
    assert store.read_calls == 0

    with pytest.raises(StoreUnreadable, match="not a database"):
        list(records)
