from __future__ import annotations
"""Preset: une paire d'items nommée, basculée à chaque swap."""

from dataclasses import dataclass

from core.item import normalize_name


@dataclass(slots=True, kw_only=True)
class Preset:
    name: str
    item1: str    # item "normal"
    item2: str    # item posé pendant le GCD

    def __post_init__(self) -> None:
        self.name = normalize_name(self.name)
        self.item1 = normalize_name(self.item1)
        self.item2 = normalize_name(self.item2)

    def counterpart(self, equipped_name: str | None) -> str | None:
        """L'autre item de la paire si `equipped_name` en fait partie."""
        key = normalize_name(equipped_name)
        if not key:
            return None
        if key == self.item1:
            return self.item2
        if key == self.item2:
            return self.item1
        return None

    # Les champs persistés gardent les anciens noms weapon1/weapon2
    def to_dict(self) -> dict:
        return {"weapon1": self.item1, "weapon2": self.item2}

    @classmethod
    def from_dict(cls, name: str, d: dict) -> Preset:
        return cls(name=name, item1=str(d.get("weapon1", "")), item2=str(d.get("weapon2", "")))
