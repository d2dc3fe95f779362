from __future__ import annotations
"""État de session (non persisté) de l'addon."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.preset import Preset


@dataclass
class AddonState:
    armed: bool = False
    swap_in_progress: bool = False
    current_preset: Preset | None = None   # None -> mode manuel (bag/slot par défaut)
