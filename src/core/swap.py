from __future__ import annotations
"""Exécution du swap: échange bag <-> slot équipé en trois "pickups".

Deux modes:
- manuel: bag/slot explicite (par défaut ceux de la config) <-> main droite;
- preset: repère lequel des deux items est équipé (main droite, main gauche,
  puis distance/relique) et va chercher l'autre dans les sacs.

Séquence client (identique pour les deux modes):
  1) ramasser l'item du sac          -> curseur
  2) ramasser le slot équipé          -> l'item du curseur est équipé, l'ancien passe au curseur
  3) ramasser à nouveau le slot du sac -> l'ancien item est reposé dans le sac
"""

from typing import TYPE_CHECKING

from core.equipment import SWAP_ORDER, EquipSlot
from core.inventory import equipped_item_name, find_item_in_bags
from core.settings import SOUND_SWAPPED
from core.swap_types import ChatEvent, SwapError, SwapResult

if TYPE_CHECKING:
    from core.host import Host
    from core.settings import Config
    from core.state import AddonState


class SwapExecutor:
    """Effectue un échange; garde `swap_in_progress` contre la réentrance."""

    def __init__(self, host: Host, state: AddonState, config: Config) -> None:
        self.host = host
        self.state = state
        self.config = config

    def swap(self) -> SwapResult:
        """Mode preset si un preset est chargé, sinon bag/slot par défaut."""
        if self.state.current_preset is not None:
            return self.swap_by_preset()
        return self.swap_by_slot(self.config.bag, self.config.slot)

    # ---- mode manuel ----

    def swap_by_slot(self, bag: int, slot: int, equip_slot: EquipSlot = EquipSlot.MAINHAND) -> SwapResult:
        if self.state.swap_in_progress:
            return self._busy()

        if not self.host.get_container_item_link(bag, slot):
            return SwapResult.failure(SwapError.EMPTY_BAG_SLOT, [ChatEvent(f"No item in Bag {bag}, Slot {slot}", "error")])

        events: list[ChatEvent] = []
        if equipped_item_name(self.host, equip_slot) is None:
            events.append(ChatEvent(f"No item equipped in {equip_slot.label}", "debug"))

        events.append(ChatEvent(f"Swapping {equip_slot.label} <-> Bag({bag},{slot})", "debug"))
        self._exchange(bag, slot, equip_slot)
        events.append(ChatEvent("Item swapped!", "debug"))
        return SwapResult.success(events, value={"bag": bag, "slot": slot, "equip_slot": equip_slot})

    # ---- mode preset ----

    def swap_by_preset(self) -> SwapResult:
        if self.state.swap_in_progress:
            return self._busy()

        preset = self.state.current_preset
        if preset is None:
            return SwapResult.failure(SwapError.NO_PRESET_LOADED, [ChatEvent("No preset loaded", "error")])

        events = [
            ChatEvent(f"Looking for item1: [{preset.item1}]", "debug"),
            ChatEvent(f"Looking for item2: [{preset.item2}]", "debug"),
        ]

        active: EquipSlot | None = None
        target: str | None = None
        for equip_slot in SWAP_ORDER:
            equipped = equipped_item_name(self.host, equip_slot)
            events.append(ChatEvent(f"{equip_slot.label}: [{equipped or 'nothing'}]", "debug"))
            target = preset.counterpart(equipped)
            if target is not None:
                active = equip_slot
                break

        if active is None or target is None:
            events.append(ChatEvent("Neither preset item is equipped!", "error"))
            return SwapResult.failure(SwapError.NEITHER_ITEM_EQUIPPED, events)

        found = find_item_in_bags(self.host, target)
        if found is None:
            events.append(ChatEvent(f"Cannot find '{target}' in bags!", "error"))
            return SwapResult.failure(SwapError.ITEM_NOT_FOUND_IN_BAGS, events)

        bag, slot = found
        events.append(ChatEvent(f"Swapping {active.label} to: {target} from Bag({bag},{slot})", "debug"))
        self._exchange(bag, slot, active)
        events.append(ChatEvent(f"Swapped to: {target}", "debug"))
        return SwapResult.success(events, value={"item": target, "bag": bag, "slot": slot, "equip_slot": active})

    # ---- helpers ----

    def _exchange(self, bag: int, slot: int, equip_slot: EquipSlot) -> None:
        self.state.swap_in_progress = True
        try:
            self.host.pickup_container_item(bag, slot)
            self.host.pickup_inventory_item(int(equip_slot))
            self.host.pickup_container_item(bag, slot)
        finally:
            self.state.swap_in_progress = False

        if self.config.sound:
            self.host.play_sound(SOUND_SWAPPED)

    def _busy(self) -> SwapResult:
        return SwapResult.failure(
            SwapError.SWAP_ALREADY_IN_PROGRESS,
            [ChatEvent("Swap already in progress, ignoring", "debug")],
        )
