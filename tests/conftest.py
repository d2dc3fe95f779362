"""Fixtures partagées: client enregistreur au-dessus de SimInventory."""

import pytest

from core.equipment import EquipSlot
from core.host import HostEvent
from core.inventory import SimInventory
from core.item import make_item_link
from core.save import SavedVariables
from game.addon import GCDSwapAddon


class RecordingHost:
    """Host de test: inventaire simulé, chat et sons enregistrés, compteur de pickups."""

    def __init__(self, inventory: SimInventory) -> None:
        self.inventory = inventory
        self.messages: list[tuple[str, str]] = []
        self.sounds: list[str] = []
        self.pickups: list[tuple] = []
        self.events: dict[HostEvent, list] = {}
        self.slash: dict[str, object] = {}

    def get_container_item_link(self, bag, slot):
        return self.inventory.bag_link(bag, slot)

    def get_inventory_item_link(self, unit, slot):
        return self.inventory.equipped_link(slot) if unit == "player" else None

    def get_container_num_slots(self, bag):
        return self.inventory.num_slots(bag)

    def pickup_container_item(self, bag, slot):
        self.pickups.append(("bag", bag, slot))
        self.inventory.pickup_bag(bag, slot)

    def pickup_inventory_item(self, slot):
        self.pickups.append(("equip", slot))
        self.inventory.pickup_equipped(slot)

    def add_message(self, text, color):
        self.messages.append((text, color))

    def play_sound(self, name):
        self.sounds.append(name)

    def register_event(self, event, handler):
        self.events.setdefault(event, []).append(handler)

    def register_slash_command(self, prefix, handler):
        self.slash[prefix] = handler

    # helpers
    def fire(self, event, *args):
        for handler in self.events.get(event, []):
            handler(*args)

    def texts(self) -> list[str]:
        return [t for t, _ in self.messages]


def link(name: str) -> str:
    return make_item_link(name, 1234, "ff0070dd")


@pytest.fixture
def inventory():
    inv = SimInventory({0: 16, 1: 8})
    inv.equip(EquipSlot.MAINHAND, link("Aurastone Hammer"))
    inv.put_in_bag(0, 1, link("Mace of Unending Life"))
    return inv


@pytest.fixture
def host(inventory):
    return RecordingHost(inventory)


@pytest.fixture
def addon(host):
    a = GCDSwapAddon(host, SavedVariables())
    a.install()
    return a
