from __future__ import annotations
"""Types neutres du swap: erreurs, messages pour le chat, résultat."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Literal, TypeAlias

Tag: TypeAlias = Literal["info", "error", "debug"]


class SwapError(Enum):
    EMPTY_NAME = auto()
    MISSING_ITEM_ARGUMENT = auto()
    PRESET_NOT_FOUND = auto()
    NO_PRESET_LOADED = auto()
    NEITHER_ITEM_EQUIPPED = auto()
    ITEM_NOT_FOUND_IN_BAGS = auto()
    EMPTY_BAG_SLOT = auto()
    SWAP_ALREADY_IN_PROGRESS = auto()


@dataclass
class ChatEvent:
    """Une ligne pour le chat + son canal (info/error/debug)."""
    text: str
    tag: Tag = "info"


@dataclass
class SwapResult:
    """Résultat d'une opération (store, arm, swap). Vrai si réussie."""
    ok: bool
    error: SwapError | None = None
    events: list[ChatEvent] = field(default_factory=list)
    value: Any = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, events: list[ChatEvent] | None = None, value: Any = None) -> SwapResult:
        return cls(ok=True, events=list(events or []), value=value)

    @classmethod
    def failure(cls, error: SwapError, events: list[ChatEvent] | None = None) -> SwapResult:
        return cls(ok=False, error=error, events=list(events or []))
