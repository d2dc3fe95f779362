from __future__ import annotations
"""Stockage des presets: nom (insensible à la casse) -> paire d'items.

- Les clés sont normalisées une seule fois, ici (save et lookup).
- Aucune I/O: chaque opération renvoie un SwapResult avec ses lignes de chat.
"""

from typing import TYPE_CHECKING

from core.item import normalize_name
from core.preset import Preset
from core.swap_types import ChatEvent, SwapError, SwapResult

if TYPE_CHECKING:
    from core.state import AddonState


class PresetStore:
    """Presets persistés + preset courant (dans AddonState)."""

    def __init__(self, presets: dict[str, Preset], state: AddonState) -> None:
        self._presets = presets   # partagé avec SavedVariables
        self.state = state

    def __len__(self) -> int:
        return len(self._presets)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._presets

    def get(self, name: str | None) -> Preset | None:
        return self._presets.get(normalize_name(name))

    def save(self, name: str | None, item1: str | None, item2: str | None) -> SwapResult:
        """Crée ou écrase un preset (la dernière sauvegarde gagne)."""
        if not normalize_name(name):
            return SwapResult.failure(SwapError.EMPTY_NAME, [ChatEvent("Preset name cannot be empty", "error")])
        if not normalize_name(item1) or not normalize_name(item2):
            return SwapResult.failure(SwapError.MISSING_ITEM_ARGUMENT, [ChatEvent("Both item names required", "error")])

        preset = Preset(name=name, item1=item1, item2=item2)
        self._presets[preset.name] = preset
        return SwapResult.success([
            ChatEvent(f"Preset '{name}' saved:"),
            ChatEvent(f"  Item1 (normal): {preset.item1}"),
            ChatEvent(f"  Item2 (GCD swap): {preset.item2}"),
            ChatEvent(f"Saved as: [{preset.item1}] <-> [{preset.item2}]", "debug"),
        ], value=preset)

    def delete(self, name: str | None) -> SwapResult:
        key = normalize_name(name)
        if not key:
            return SwapResult.failure(SwapError.EMPTY_NAME, [ChatEvent("Preset name required", "error")])
        if key not in self._presets:
            return SwapResult.failure(SwapError.PRESET_NOT_FOUND, [ChatEvent(f"Preset '{key}' not found", "error")])
        del self._presets[key]
        return SwapResult.success([ChatEvent(f"Preset '{key}' deleted")])

    def list(self) -> SwapResult:
        presets = list(self._presets.values())
        events = [ChatEvent("Saved Presets:")]
        for p in presets:
            events.append(ChatEvent(f"  {p.name}: {p.item1} <-> {p.item2}"))
        if not presets:
            events.append(ChatEvent("  (no presets saved)"))
        return SwapResult.success(events, value=presets)

    def load(self, name: str | None) -> SwapResult:
        """Résout `name` et en fait le preset courant du mode preset."""
        key = normalize_name(name)
        if not key:
            return SwapResult.failure(SwapError.EMPTY_NAME, [ChatEvent("Preset name required", "error")])
        preset = self._presets.get(key)
        if preset is None:
            return SwapResult.failure(SwapError.PRESET_NOT_FOUND, [ChatEvent(f"Preset '{key}' not found", "error")])
        self.state.current_preset = preset
        return SwapResult.success(
            [ChatEvent(f"Loaded preset '{key}': {preset.item1} <-> {preset.item2}", "debug")],
            value=preset,
        )
