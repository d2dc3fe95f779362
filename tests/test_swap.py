"""SwapExecutor: mode manuel, mode preset, garde de réentrance."""

from conftest import RecordingHost, link
from core.equipment import EquipSlot
from core.inventory import SimInventory, find_item_in_bags
from core.preset import Preset
from core.settings import SOUND_SWAPPED, Config
from core.state import AddonState
from core.swap import SwapExecutor
from core.swap_types import SwapError


def _executor(host, **cfg):
    return SwapExecutor(host, AddonState(), Config(**cfg))


def test_manual_swap_trades_places(host, inventory):
    ex = _executor(host)
    res = ex.swap_by_slot(0, 1)
    assert res
    assert inventory.equipped_link(EquipSlot.MAINHAND) == link("Mace of Unending Life")
    assert inventory.bag_link(0, 1) == link("Aurastone Hammer")
    assert inventory.cursor is None
    assert host.pickups == [("bag", 0, 1), ("equip", 16), ("bag", 0, 1)]
    assert host.sounds == [SOUND_SWAPPED]
    assert ex.state.swap_in_progress is False


def test_manual_swap_into_empty_slot(host, inventory):
    inventory.equip(EquipSlot.MAINHAND, None)
    res = _executor(host, sound=False).swap_by_slot(0, 1)
    assert res
    assert inventory.equipped_link(EquipSlot.MAINHAND) == link("Mace of Unending Life")
    assert inventory.bag_link(0, 1) is None
    assert host.sounds == []


def test_manual_swap_empty_bag_slot(host, inventory):
    res = _executor(host).swap_by_slot(0, 2)
    assert res.error is SwapError.EMPTY_BAG_SLOT
    assert host.pickups == []


def test_reentrant_call_is_rejected(host, inventory):
    ex = _executor(host)
    ex.state.swap_in_progress = True
    before = inventory.list_summary()
    res = ex.swap_by_slot(0, 1)
    assert res.error is SwapError.SWAP_ALREADY_IN_PROGRESS
    ex.state.current_preset = Preset(name="w", item1="aurastone hammer", item2="mace of unending life")
    assert ex.swap_by_preset().error is SwapError.SWAP_ALREADY_IN_PROGRESS
    assert host.pickups == []
    assert inventory.list_summary() == before


def test_preset_swap_requires_loaded_preset(host):
    assert _executor(host).swap_by_preset().error is SwapError.NO_PRESET_LOADED


def test_preset_swap_relic_slot():
    inv = SimInventory({0: 16})
    inv.equip(EquipSlot.MAINHAND, link("Stormstrike Hammer"))
    inv.equip(EquipSlot.RANGED, link("Totem of Rage"))
    inv.put_in_bag(0, 3, link("Totem of Sustaining"))
    host = RecordingHost(inv)
    ex = _executor(host)
    ex.state.current_preset = Preset(name="totems", item1="totem of rage", item2="totem of sustaining")

    res = ex.swap_by_preset()
    assert res
    assert res.value["item"] == "totem of sustaining"
    assert res.value["equip_slot"] is EquipSlot.RANGED
    assert host.pickups == [("bag", 0, 3), ("equip", 18), ("bag", 0, 3)]
    assert inv.equipped_link(EquipSlot.RANGED) == link("Totem of Sustaining")
    assert inv.bag_link(0, 3) == link("Totem of Rage")
    assert inv.equipped_link(EquipSlot.MAINHAND) == link("Stormstrike Hammer")


def test_preset_swap_toggles_back(host, inventory):
    ex = _executor(host)
    ex.state.current_preset = Preset(name="w", item1="Aurastone Hammer", item2="Mace of Unending Life")
    assert ex.swap_by_preset().value["item"] == "mace of unending life"
    assert ex.swap_by_preset().value["item"] == "aurastone hammer"
    assert inventory.equipped_link(EquipSlot.MAINHAND) == link("Aurastone Hammer")
    assert inventory.bag_link(0, 1) == link("Mace of Unending Life")


def test_mainhand_checked_before_offhand():
    inv = SimInventory({0: 4})
    inv.equip(EquipSlot.MAINHAND, link("Krol Blade"))
    inv.equip(EquipSlot.OFFHAND, link("Krol Blade"))
    inv.put_in_bag(0, 2, link("Dal'Rend's Tribal Guardian"))
    host = RecordingHost(inv)
    ex = _executor(host)
    ex.state.current_preset = Preset(name="dw", item1="krol blade", item2="dal'rend's tribal guardian")
    res = ex.swap_by_preset()
    assert res.value["equip_slot"] is EquipSlot.MAINHAND


def test_neither_item_equipped(host):
    ex = _executor(host)
    ex.state.current_preset = Preset(name="t", item1="totem of rage", item2="totem of sustaining")
    res = ex.swap_by_preset()
    assert res.error is SwapError.NEITHER_ITEM_EQUIPPED
    assert host.pickups == []


def test_target_not_in_bags(host, inventory):
    inventory.put_in_bag(0, 1, None)
    ex = _executor(host)
    ex.state.current_preset = Preset(name="w", item1="aurastone hammer", item2="mace of unending life")
    res = ex.swap_by_preset()
    assert res.error is SwapError.ITEM_NOT_FOUND_IN_BAGS
    assert ex.state.swap_in_progress is False


def test_bag_search_order(host, inventory):
    inventory.put_in_bag(1, 1, link("Mace of Unending Life"))
    inventory.put_in_bag(0, 5, link("Mace of Unending Life"))
    assert find_item_in_bags(host, "MACE OF UNENDING LIFE") == (0, 1)
    inventory.put_in_bag(0, 1, None)
    assert find_item_in_bags(host, "mace of unending life") == (0, 5)
    assert find_item_in_bags(host, "") is None


def test_dispatch_uses_config_default_slot(host, inventory):
    inventory.put_in_bag(0, 4, link("Tome of Knowledge"))
    ex = _executor(host, bag=0, slot=4)
    assert ex.swap()
    assert inventory.equipped_link(EquipSlot.MAINHAND) == link("Tome of Knowledge")
