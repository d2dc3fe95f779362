from __future__ import annotations
"""Emplacements d'équipement échangeables (ids du client 1.12)."""

from enum import IntEnum


class EquipSlot(IntEnum):
    MAINHAND = 16
    OFFHAND = 17
    RANGED = 18   # arme à distance / relique / totem / idole

    @property
    def label(self) -> str:
        return {
            EquipSlot.MAINHAND: "MainHand",
            EquipSlot.OFFHAND: "OffHand",
            EquipSlot.RANGED: "Ranged",
        }[self]


# Ordre de recherche fixe du slot actif en mode preset
SWAP_ORDER: tuple[EquipSlot, ...] = (EquipSlot.MAINHAND, EquipSlot.OFFHAND, EquipSlot.RANGED)

BAG_IDS: tuple[int, ...] = (0, 1, 2, 3, 4)
PLAYER_UNIT = "player"
