from __future__ import annotations
"""Client texte: implémente Host au-dessus de SimInventory, uniquement pour tests/dev."""

import logging
from typing import TYPE_CHECKING

from colorama import Fore, Style

from core.equipment import PLAYER_UNIT
from core.host import EventHandler, HostEvent, SlashHandler
from core.settings import COLOR_DEBUG, COLOR_ERROR, COLOR_INFO

if TYPE_CHECKING:
    from core.inventory import SimInventory
    from ui.audio import AudioManager

log = logging.getLogger(__name__)

# Couleurs terminal approximatives (RGB)
_PALETTE: list[tuple[tuple[int, int, int], str]] = [
    ((255, 255, 255), Fore.WHITE),
    ((255, 85, 85), Fore.RED),
    ((85, 255, 85), Fore.GREEN),
    ((255, 255, 85), Fore.YELLOW),
    ((85, 85, 255), Fore.BLUE),
    ((255, 85, 255), Fore.MAGENTA),
    ((85, 255, 255), Fore.CYAN),
]


# Canaux du chat de l'addon: correspondance fixe
_CHAT_COLORS: dict[str, str] = {
    COLOR_INFO: Fore.CYAN,
    COLOR_ERROR: Fore.RED,
    COLOR_DEBUG: Fore.BLUE,
}


def fore_for(color: str) -> str:
    """Couleur colorama la plus proche d'un hex RRGGBB (ou AARRGGBB)."""
    exact = _CHAT_COLORS.get(color[-6:].lower())
    if exact is not None:
        return exact
    hexa = color[-6:]
    try:
        rgb = tuple(int(hexa[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return Fore.WHITE
    return min(_PALETTE, key=lambda p: sum((a - b) ** 2 for a, b in zip(p[0], rgb)))[1]


class ConsoleHost:
    """Implémentation texte des primitives du client utilisées par l'addon."""

    def __init__(self, inventory: SimInventory, audio: AudioManager | None = None) -> None:
        self.inventory = inventory
        self.audio = audio
        self._events: dict[HostEvent, list[EventHandler]] = {}
        self._slash: dict[str, SlashHandler] = {}

    # ---------- Inventaire ----------

    def get_container_item_link(self, bag: int, slot: int) -> str | None:
        return self.inventory.bag_link(bag, slot)

    def get_inventory_item_link(self, unit: str, slot: int) -> str | None:
        if unit != PLAYER_UNIT:
            return None
        return self.inventory.equipped_link(slot)

    def get_container_num_slots(self, bag: int) -> int:
        return self.inventory.num_slots(bag)

    def pickup_container_item(self, bag: int, slot: int) -> None:
        self.inventory.pickup_bag(bag, slot)

    def pickup_inventory_item(self, slot: int) -> None:
        self.inventory.pickup_equipped(slot)

    # ---------- Chat / son ----------

    def add_message(self, text: str, color: str) -> None:
        print(fore_for(color) + text + Style.RESET_ALL)

    def play_sound(self, name: str) -> None:
        log.debug("son: %s", name)
        if self.audio is not None:
            self.audio.play_sound(name)

    # ---------- Enregistrements ----------

    def register_event(self, event: HostEvent, handler: EventHandler) -> None:
        self._events.setdefault(event, []).append(handler)

    def register_slash_command(self, prefix: str, handler: SlashHandler) -> None:
        self._slash[prefix.lower()] = handler

    # ---------- Pilotage (boucle console) ----------

    def fire(self, event: HostEvent, *args) -> None:
        for handler in self._events.get(event, []):
            handler(*args)

    def run_slash(self, line: str) -> bool:
        """Passe le reste de la ligne au handler du préfixe. False si inconnu."""
        head = line.split(None, 1)[0].lower() if line.strip() else ""
        handler = self._slash.get(head)
        if handler is None:
            return False
        # le client coupe "<commande> " : tout ce qui suit le premier caractère après la commande
        handler(line.lstrip()[len(head) + 1:])
        return True

    def present_text(self, text: str) -> None:
        print(text)

    def show_inventory(self) -> None:
        rows = self.inventory.list_summary()
        print("Équipement :")
        for r in rows:
            if r["kind"] == "equip":
                print(f"  {r['slot']:<9}: {r['name'] or '(vide)'}")
        print("Sacs :")
        bag_rows = [r for r in rows if r["kind"] == "bag"]
        if not bag_rows:
            print("  (vides)")
        for r in bag_rows:
            print(f"  Bag({r['bag']},{r['slot']}): {r['name']}")
        if self.inventory.cursor:
            print(f"Curseur : {self.inventory.cursor}")
