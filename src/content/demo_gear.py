from __future__ import annotations
"""Quelques items concrets pour peupler l'inventaire simulé."""

from core.equipment import EquipSlot
from core.inventory import SimInventory
from core.item import make_item_link

# Couleurs de qualité du client
RARE = "ff0070dd"
EPIC = "ffa335ee"

# (nom, id, qualité)
DEMO_ITEMS = {
    "aurastone_hammer": ("Aurastone Hammer", 17105, EPIC),
    "mace_of_unending_life": ("Mace of Unending Life", 17070, EPIC),
    "tome_of_knowledge": ("Tome of Knowledge", 7666, RARE),
    "totem_of_rage": ("Totem of Rage", 22395, RARE),
    "totem_of_sustaining": ("Totem of Sustaining", 23200, RARE),
}


def link_for(key: str) -> str:
    name, item_id, color = DEMO_ITEMS[key]
    return make_item_link(name, item_id, color)


def build_demo_inventory() -> SimInventory:
    """Marteau en main droite, totem en relique; les alternatives dans le sac 0."""
    inv = SimInventory({0: 16, 1: 10})
    inv.equip(EquipSlot.MAINHAND, link_for("aurastone_hammer"))
    inv.equip(EquipSlot.OFFHAND, link_for("tome_of_knowledge"))
    inv.equip(EquipSlot.RANGED, link_for("totem_of_rage"))
    inv.put_in_bag(0, 1, link_for("mace_of_unending_life"))
    inv.put_in_bag(0, 3, link_for("totem_of_sustaining"))
    return inv
