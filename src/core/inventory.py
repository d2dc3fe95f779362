from __future__ import annotations
"""Inventaire: recherches dans les sacs/slots équipés + modèle simulé du client.

- Les recherches passent uniquement par les primitives `Host` (aucun état ici).
- `SimInventory` reproduit le curseur du client: ramasser un slot échange
  son contenu avec celui du curseur. Sert au ConsoleHost et aux tests.
"""

from typing import TYPE_CHECKING

from core.equipment import BAG_IDS, PLAYER_UNIT, EquipSlot
from core.item import item_name_from_link, normalize_name

if TYPE_CHECKING:
    from core.host import Host

INVENTORY_SLOT_IDS = range(0, 20)


# ---- Recherches (via Host) ----

def equipped_item_name(host: Host, slot: EquipSlot) -> str | None:
    """Nom (minuscules) de l'item équipé dans `slot`, None si vide."""
    return item_name_from_link(host.get_inventory_item_link(PLAYER_UNIT, int(slot)))


def find_item_in_bags(host: Host, item_name: str | None) -> tuple[int, int] | None:
    """Premier (bag, slot) dont l'item porte ce nom. Sacs 0..4 puis slots 1..N."""
    wanted = normalize_name(item_name)
    if not wanted:
        return None
    for bag in BAG_IDS:
        for slot in range(1, host.get_container_num_slots(bag) + 1):
            link = host.get_container_item_link(bag, slot)
            if link and item_name_from_link(link) == wanted:
                return bag, slot
    return None


# ---- Modèle simulé ----

class SimInventory:
    """Sacs + slots équipés + curseur, en mémoire.

    Exemple: SimInventory({0: 16, 1: 10}) -> sac 0 de 16 slots, sac 1 de 10,
    sacs 2..4 absents (0 slot).
    """

    def __init__(self, bag_sizes: dict[int, int] | None = None) -> None:
        sizes = {0: 16} if bag_sizes is None else dict(bag_sizes)
        for bag in sizes:
            if bag not in BAG_IDS:
                raise ValueError(f"sac invalide {bag}")
        self._bags: dict[int, list[str | None]] = {
            bag: [None] * max(0, int(sizes.get(bag, 0))) for bag in BAG_IDS
        }
        self._equipped: dict[int, str | None] = {}
        self.cursor: str | None = None

    # ---- Introspection ----

    def num_slots(self, bag: int) -> int:
        if bag not in self._bags:
            return 0
        return len(self._bags[bag])

    def bag_link(self, bag: int, slot: int) -> str | None:
        if not (1 <= slot <= self.num_slots(bag)):
            return None
        return self._bags[bag][slot - 1]

    def equipped_link(self, slot: int) -> str | None:
        return self._equipped.get(int(slot))

    def list_summary(self) -> list[dict]:
        """Résumé lisible pour l'UI (pas d'I/O ici)."""
        rows: list[dict] = []
        for slot in EquipSlot:
            rows.append({"kind": "equip", "slot": slot.label, "name": item_name_from_link(self.equipped_link(slot))})
        for bag in BAG_IDS:
            for i, link in enumerate(self._bags[bag], start=1):
                if link:
                    rows.append({"kind": "bag", "bag": bag, "slot": i, "name": item_name_from_link(link)})
        return rows

    # ---- Mise en place ----

    def put_in_bag(self, bag: int, slot: int, link: str | None) -> None:
        self._check_bag_slot(bag, slot)
        self._bags[bag][slot - 1] = link

    def equip(self, slot: int, link: str | None) -> None:
        self._check_inventory_slot(slot)
        self._equipped[int(slot)] = link

    # ---- Curseur ----

    def pickup_bag(self, bag: int, slot: int) -> None:
        """Échange le contenu du slot de sac avec le curseur."""
        self._check_bag_slot(bag, slot)
        held = self._bags[bag][slot - 1]
        self._bags[bag][slot - 1] = self.cursor
        self.cursor = held

    def pickup_equipped(self, slot: int) -> None:
        """Équipe le curseur; l'objet déplacé passe sur le curseur."""
        self._check_inventory_slot(slot)
        held = self._equipped.get(int(slot))
        self._equipped[int(slot)] = self.cursor
        self.cursor = held

    # ---- Validation ----

    def _check_bag_slot(self, bag: int, slot: int) -> None:
        if bag not in self._bags:
            raise ValueError(f"sac invalide {bag}")
        if not (1 <= slot <= len(self._bags[bag])):
            raise ValueError(f"slot invalide {bag}/{slot}")

    def _check_inventory_slot(self, slot: int) -> None:
        if int(slot) not in INVENTORY_SLOT_IDS:
            raise ValueError(f"slot d'équipement invalide {slot}")
