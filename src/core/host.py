from __future__ import annotations
"""Interface vers le client de jeu (inventaire, chat, son, évènements).

Le client n'est pas sous notre contrôle: on ne consomme que ces primitives.
`ui.console_io.ConsoleHost` en fournit une implémentation texte.
"""

from enum import Enum
from typing import Callable, Protocol


class HostEvent(Enum):
    """Évènements livrés par le client."""
    ADDON_LOADED = "ADDON_LOADED"      # arg: nom de l'addon
    SPELLCAST_STOP = "SPELLCAST_STOP"  # fin d'un cast instantané (début du GCD)


EventHandler = Callable[..., None]
SlashHandler = Callable[[str], None]


class Host(Protocol):
    # Inventaire (lecture)
    def get_container_item_link(self, bag: int, slot: int) -> str | None: ...
    def get_inventory_item_link(self, unit: str, slot: int) -> str | None: ...
    def get_container_num_slots(self, bag: int) -> int: ...
    # Inventaire (curseur)
    def pickup_container_item(self, bag: int, slot: int) -> None: ...
    def pickup_inventory_item(self, slot: int) -> None: ...
    # Chat / son
    def add_message(self, text: str, color: str) -> None: ...
    def play_sound(self, name: str) -> None: ...
    # Enregistrements
    def register_event(self, event: HostEvent, handler: EventHandler) -> None: ...
    def register_slash_command(self, prefix: str, handler: SlashHandler) -> None: ...
