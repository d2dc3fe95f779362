"""PresetStore: save / delete / list / load."""

import pytest

from core.preset_store import PresetStore
from core.state import AddonState
from core.swap_types import SwapError


@pytest.fixture
def store():
    return PresetStore({}, AddonState())


@pytest.mark.parametrize("name,item1,item2", [
    ("Weps", "Aurastone Hammer", "Mace of Unending Life"),
    ("TOTEMS", "TOTEM OF RAGE", "totem of sustaining"),
    ("x", "a", "B"),
])
def test_save_then_load_lowercases(store, name, item1, item2):
    assert store.save(name, item1, item2)
    res = store.load(name.upper())
    assert res
    assert res.value.item1 == item1.lower()
    assert res.value.item2 == item2.lower()
    assert store.state.current_preset is res.value


def test_save_overwrites(store):
    store.save("weps", "a", "b")
    store.save("WEPS", "c", "d")
    assert len(store) == 1
    assert store.get("weps").item1 == "c"


def test_save_rejects_empty(store):
    assert store.save("", "a", "b").error is SwapError.EMPTY_NAME
    assert store.save("weps", "a", "").error is SwapError.MISSING_ITEM_ARGUMENT
    assert store.save("weps", None, "b").error is SwapError.MISSING_ITEM_ARGUMENT
    assert len(store) == 0


def test_save_confirmation_lists_both_items(store):
    res = store.save("weps", "Aurastone Hammer", "Mace of Unending Life")
    texts = [e.text for e in res.events if e.tag == "info"]
    assert any("aurastone hammer" in t for t in texts)
    assert any("mace of unending life" in t for t in texts)


def test_delete_missing_leaves_store_unchanged(store):
    store.save("weps", "a", "b")
    res = store.delete("nope")
    assert not res
    assert res.error is SwapError.PRESET_NOT_FOUND
    assert "weps" in store


def test_delete_removes_only_that_entry(store):
    store.save("weps", "a", "b")
    store.save("totems", "c", "d")
    assert store.delete("WEPS")
    assert "weps" not in store
    assert "totems" in store


def test_list_empty_sentinel(store):
    res = store.list()
    assert res.value == []
    assert res.events[-1].text.strip() == "(no presets saved)"


def test_list_entries(store):
    store.save("weps", "a", "b")
    res = store.list()
    assert [p.name for p in res.value] == ["weps"]
    assert "weps: a <-> b" in res.events[1].text


def test_load_unknown(store):
    res = store.load("ghost")
    assert res.error is SwapError.PRESET_NOT_FOUND
    assert store.state.current_preset is None
