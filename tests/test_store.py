"""
Unit tests for the in-memory record store and identifier normalisation.
"""

from __future__ import annotations

import pytest

from shop_services.app.core.store import RecordStore, canonical_id


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, "1"),
        ("1", "1"),
        (1.0, "1"),
        (" 7 ", "7"),
        (2.5, "2.5"),
        ("abc", "abc"),
        (True, "true"),
        (None, None),
        ("01", "1"),
        ("1.0", "1"),
        ("2.50", "2.5"),
        ("-0", "0"),
        (10**30, str(10**30)),
        ("nan", "nan"),
        ("1_0", "1_0"),
        ("", ""),
    ],
)
def test_canonical_id(value: object, expected: str | None) -> None:
    assert canonical_id(value) == expected


def test_new_store_is_empty() -> None:
    store = RecordStore()
    assert len(store) == 0
    assert store.all() == []


def test_all_preserves_insertion_order_and_returns_copy() -> None:
    store = RecordStore()
    store.append({"id": 2})
    store.append({"id": 1})

    records = store.all()
    records.append({"id": 3})

    assert store.all() == [{"id": 2}, {"id": 1}]


def test_find_matches_numeric_and_string_ids() -> None:
    store = RecordStore()
    store.append({"id": 1, "name": "first"})
    store.append({"id": "2", "name": "second"})

    assert store.find("1") == {"id": 1, "name": "first"}
    assert store.find(2) == {"id": "2", "name": "second"}
    assert store.find("3") is None


def test_find_returns_first_of_duplicates() -> None:
    store = RecordStore()
    store.append({"id": 1, "n": "a"})
    store.append({"id": 1, "n": "b"})

    assert store.find(1)["n"] == "a"


def test_records_without_id_never_match() -> None:
    store = RecordStore()
    store.append({"name": "no id"})

    assert store.find(None) is None
    assert store.remove(None) == 0
    assert len(store) == 1


def test_remove_drops_every_match_and_keeps_others() -> None:
    store = RecordStore()
    store.append({"id": 1})
    store.append({"id": "1"})
    store.append({"id": 2})

    assert store.remove("1") == 2
    assert store.all() == [{"id": 2}]


def test_remove_without_match_is_noop() -> None:
    store = RecordStore()
    store.append({"id": 1})

    assert store.remove(42) == 0
    assert store.all() == [{"id": 1}]


def test_numeric_strings_match_numeric_ids() -> None:
    store = RecordStore()
    store.append({"id": 1})
    store.append({"id": 2.5})

    assert store.find("01") == {"id": 1}
    assert store.find("1.0") == {"id": 1}
    assert store.find("2.50") == {"id": 2.5}
    assert store.remove("1.0") == 1
    assert store.all() == [{"id": 2.5}]


def test_boolean_id_does_not_match_one() -> None:
    store = RecordStore()
    store.append({"id": True})

    assert store.find(1) is None
    assert store.find("true") == {"id": True}
