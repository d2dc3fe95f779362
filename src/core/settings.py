from __future__ import annotations
"""Constantes de l'addon et configuration par défaut (bag/slot, debug, son)."""

from dataclasses import dataclass

ADDON_NAME = "gcdswap"
SLASH_COMMAND = "/gcdswap"
CHAT_PREFIX = "[GCDSwap]"

# Couleurs du chat (hex RRGGBB)
COLOR_INFO = "88ccff"
COLOR_ERROR = "ff8888"
COLOR_DEBUG = "aaaaff"

SOUND_ARMED = "igMainMenuOpen"
SOUND_SWAPPED = "igMainMenuOptionCheckBoxOn"


@dataclass(slots=True, kw_only=True)
class Config:
    """Réglages persistés: cible par défaut du mode manuel + toggles."""
    bag: int = 0
    slot: int = 1
    debug: bool = False
    sound: bool = True

    def toggle_debug(self) -> bool:
        self.debug = not self.debug
        return self.debug

    def toggle_sound(self) -> bool:
        self.sound = not self.sound
        return self.sound


def DEFAULT_CONFIG() -> Config:
    return Config(bag=0, slot=1, debug=False, sound=True)
