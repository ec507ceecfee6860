from __future__ import annotations

import pytest

from infinite_selection.core.models import PageRecord
from infinite_selection.selection.models import Item
from infinite_selection.selection.store import ItemStore
from tests.shared.fetchers import make_page
from tests.shared.payloads import detail_url


def test_merge_appends_names_in_page_order():
    store = ItemStore()
    appended = store.merge_page(make_page(["a", "b"]).records, set())
    assert appended == ("a", "b")
    assert store.names == ("a", "b")
    assert store.catalog_view() == (
        Item("a", detail_url("a"), False),
        Item("b", detail_url("b"), False),
    )


def test_merging_same_page_twice_keeps_single_catalog_entry():
    store = ItemStore()
    page = make_page(["a", "b"])
    store.merge_page(page.records, set())
    appended = store.merge_page(page.records, set())
    assert appended == ()
    assert store.names == ("a", "b")
    assert len(store) == 2


def test_merge_recomputes_selected_from_selection_membership():
    store = ItemStore()
    page = make_page(["a", "b"])
    store.merge_page(page.records, set())
    store.merge_page(page.records, {"b"})
    assert store.is_selected("b") is True
    assert store.is_selected("a") is False

    # A stale flag is cleared when the name is no longer in the selection.
    store.merge_page(page.records, set())
    assert store.is_selected("b") is False


def test_merge_overwrites_url_for_recurring_name():
    store = ItemStore()
    store.merge_page([PageRecord("a", "old")], set())
    store.merge_page([PageRecord("a", "new")], set())
    assert store.get("a") == Item("a", "new", False)
    assert store.names == ("a",)


def test_merge_deduplicates_names_within_one_page():
    store = ItemStore()
    appended = store.merge_page([PageRecord("a", "u1"), PageRecord("a", "u2")], set())
    assert appended == ("a",)
    assert store.names == ("a",)
    assert store.get("a").url == "u2"


def test_catalog_order_is_stable_across_merges():
    store = ItemStore()
    store.merge_page(make_page(["c", "a"]).records, set())
    before = store.names
    store.merge_page(make_page(["b", "a", "d"]).records, set())
    assert store.names[: len(before)] == before
    assert store.names == ("c", "a", "b", "d")


def test_ensure_creates_blank_item_outside_catalog_order():
    store = ItemStore()
    item = store.ensure("ghost")
    assert item == Item("ghost", "", False)
    assert "ghost" in store
    assert store.names == ()
    assert store.ensure("ghost") is item


def test_ensured_item_gets_catalog_position_on_first_fetch():
    store = ItemStore()
    store.ensure("a")
    appended = store.merge_page(make_page(["a"]).records, {"a"})
    assert appended == ("a",)
    assert store.get("a") == Item("a", detail_url("a"), True)


def test_set_selected_requires_known_name():
    store = ItemStore()
    with pytest.raises(KeyError):
        store.set_selected("missing", True)


def test_set_selected_flips_flag_and_keeps_url():
    store = ItemStore()
    store.merge_page(make_page(["a"]).records, set())
    assert store.set_selected("a", True) == Item("a", detail_url("a"), True)
    assert store.selected_names() == frozenset({"a"})
    store.set_selected("a", False)
    assert store.selected_names() == frozenset()
    assert store.names == ("a",)
