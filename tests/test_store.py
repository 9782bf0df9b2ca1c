"""Tests for the in-memory item store."""

from __future__ import annotations

import math

import pytest

from core import SEED_ITEMS, Item, ItemStore, parse_amount


def test_seeded_store_contains_demo_items(seeded_store):
    assert len(seeded_store) == len(SEED_ITEMS)
    assert [item.name for item in seeded_store] == [name for name, _, _ in SEED_ITEMS]
    assert [item.id for item in seeded_store] == list(range(1, len(SEED_ITEMS) + 1))


def test_add_parses_form_strings():
    store = ItemStore()

    item = store.add("  Google 廣告  ", "1,200", " 3000.5 ")

    assert item == Item(id=1, name="Google 廣告", spend=1200.0, budget=3000.5)
    assert store.items == (item,)


def test_add_assigns_fresh_unique_ids(seeded_store):
    first = seeded_store.add("新項目", 10, 20)
    seeded_store.remove(first.id)
    second = seeded_store.add("新項目", 10, 20)

    assert first.id != second.id
    assert len({item.id for item in seeded_store}) == len(seeded_store)


def test_add_accepts_zero_amounts():
    store = ItemStore()

    item = store.add("贊助", "0", "0")

    assert item is not None
    assert item.spend == 0.0 and item.budget == 0.0


@pytest.mark.parametrize(
    ("name", "spend", "budget"),
    [
        ("辦公室文具", "", "1000"),
        ("辦公室文具", "1500", ""),
        ("", "1500", "1000"),
        ("   ", "1500", "1000"),
        (None, "1500", "1000"),
        ("辦公室文具", "abc", "1000"),
        ("辦公室文具", "1500", None),
        ("辦公室文具", "nan", "1000"),
        ("辦公室文具", "1500", "inf"),
        ("辦公室文具", "-5", "1000"),
    ],
)
def test_add_rejects_invalid_input_without_changes(seeded_store, name, spend, budget):
    before = seeded_store.items

    assert seeded_store.add(name, spend, budget) is None
    assert seeded_store.items == before


def test_add_allows_negative_budget():
    store = ItemStore()

    item = store.add("退款", "100", "-50")

    assert item is not None
    assert item.budget == -50.0


def test_remove_deletes_matching_item(seeded_store):
    assert seeded_store.remove(3) is True

    assert len(seeded_store) == len(SEED_ITEMS) - 1
    assert all(item.id != 3 for item in seeded_store)


def test_remove_unknown_id_is_noop(seeded_store):
    before = seeded_store.items

    assert seeded_store.remove(999) is False
    assert seeded_store.items == before


def test_items_is_a_snapshot(seeded_store):
    snapshot = seeded_store.items
    seeded_store.add("新項目", 1, 1)

    assert len(snapshot) == len(SEED_ITEMS)


def test_store_continues_ids_after_existing_items():
    store = ItemStore([Item(id=41, name="既有項目", spend=1.0, budget=1.0)])

    item = store.add("新項目", 1, 1)

    assert item.id == 42


def test_clear_empties_store(seeded_store):
    seeded_store.clear()

    assert len(seeded_store) == 0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("12", 12.0), (7, 7.0), (2.5, 2.5), ("1,000.25", 1000.25), ("", None), ("x", None), (True, None)],
)
def test_parse_amount(raw, expected):
    assert parse_amount(raw) == expected


def test_parse_amount_rejects_non_finite():
    assert parse_amount(math.inf) is None
    assert parse_amount(float("nan")) is None
