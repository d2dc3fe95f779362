from __future__ import annotations
"""Addon GCDSwap: armement, déclenchement sur SPELLCAST_STOP, commande slash.

- Tout l'état vit dans l'instance (AddonState + SavedVariables).
- Aucune I/O directe: chat, son et inventaire passent par le Host.

Cycle:
  ARM     /gcdswap [preset]      -> armed = True
  TRIGGER SPELLCAST_STOP         -> swap (pendant le GCD)
  DISARM  swap réussi            -> armed = False (échec: on reste armé)
"""

import logging
from functools import partial
from typing import TYPE_CHECKING

from core.commands import parse_command
from core.equipment import SWAP_ORDER
from core.host import EventHandler, HostEvent
from core.inventory import equipped_item_name
from core.item import clean_item_name, normalize_name
from core.preset_store import PresetStore
from core.save import SavedVariables
from core.settings import (
    ADDON_NAME, CHAT_PREFIX, COLOR_DEBUG, COLOR_ERROR, COLOR_INFO, SLASH_COMMAND, SOUND_ARMED,
)
from core.state import AddonState
from core.swap import SwapExecutor
from core.swap_types import ChatEvent, SwapError, SwapResult

if TYPE_CHECKING:
    from core.commands import Command
    from core.host import Host
    from core.settings import Config

log = logging.getLogger(__name__)


# =================
# Dispatch typé
# =================

class EventDispatcher:
    """Associe chaque HostEvent à ses handlers (enregistrement explicite)."""

    def __init__(self) -> None:
        self._handlers: dict[HostEvent, list[EventHandler]] = {}

    def register(self, event: HostEvent, handler: EventHandler) -> None:
        if not isinstance(event, HostEvent):
            raise ValueError(f"évènement invalide {event!r}")
        self._handlers.setdefault(event, []).append(handler)

    def events(self) -> list[HostEvent]:
        return list(self._handlers)

    def dispatch(self, event: HostEvent, *args) -> None:
        for handler in self._handlers.get(event, []):
            handler(*args)


# =================
# Addon
# =================

class GCDSwapAddon:
    """Propriétaire unique de l'état; branché sur un Host via install()."""

    def __init__(self, host: Host, saved: SavedVariables | None = None) -> None:
        self.host = host
        self.saved = saved if saved is not None else SavedVariables()
        self.state = AddonState()
        self.presets = PresetStore(self.saved.presets, self.state)
        self.executor = SwapExecutor(host, self.state, self.saved.config)

        self.events = EventDispatcher()
        self.events.register(HostEvent.ADDON_LOADED, self.on_addon_loaded)
        self.events.register(HostEvent.SPELLCAST_STOP, self.on_spellcast_stop)

    @property
    def config(self) -> Config:
        return self.saved.config

    def install(self) -> None:
        """Enregistre les évènements et la commande slash auprès du client."""
        for event in self.events.events():
            self.host.register_event(event, partial(self.events.dispatch, event))
        self.host.register_slash_command(SLASH_COMMAND, self.handle_slash)

    # ---------- Chat ----------

    def print_msg(self, text: str) -> None:
        self.host.add_message(f"{CHAT_PREFIX} {text}", COLOR_INFO)

    def error_msg(self, text: str) -> None:
        self.host.add_message(f"{CHAT_PREFIX} {text}", COLOR_ERROR)

    def debug_msg(self, text: str) -> None:
        if self.config.debug:
            self.host.add_message(f"{CHAT_PREFIX} {text}", COLOR_DEBUG)

    def present(self, events: list[ChatEvent]) -> None:
        for ev in events:
            if ev.tag == "error":
                self.error_msg(ev.text)
            elif ev.tag == "debug":
                self.debug_msg(ev.text)
            else:
                self.print_msg(ev.text)

    # ---------- Armement ----------

    def arm(self, preset_name: str | None = None) -> SwapResult:
        """Arme le swap. Nom vide -> mode manuel (bag/slot de la config)."""
        if normalize_name(preset_name):
            res = self.presets.load(preset_name)
            self.present(res.events)
            if not res:
                return res
            self.print_msg(f"Armed with preset '{res.value.name}' - cast an instant spell")
            self.debug_msg(f"ARMED with preset '{res.value.name}'")
        else:
            self.state.current_preset = None
            self.print_msg(f"Armed: Bag({self.config.bag},{self.config.slot}) <-> MainHand - cast an instant spell")
            self.debug_msg("ARMED - Cast any instant spell to trigger swap")

        self.state.armed = True
        if self.config.sound:
            self.host.play_sound(SOUND_ARMED)
        self.debug_msg("Queue = true, listening for SPELLCAST_STOP")
        return SwapResult.success(value=self.state.current_preset)

    def disarm(self, reason: str = "manual") -> None:
        if not self.state.armed:
            return
        self.state.armed = False
        self.debug_msg(f"Queue = false ({reason})")

    # ---------- Évènements ----------

    def on_addon_loaded(self, addon_name: str | None = None) -> None:
        if normalize_name(addon_name) != ADDON_NAME:
            return
        self.print_msg(f"Loaded! Type {SLASH_COMMAND} help for commands")
        self.debug_msg(f"Default swap target: Bag {self.config.bag}, Slot {self.config.slot}")
        if len(self.presets) > 0:
            self.debug_msg(f"Loaded {len(self.presets)} preset(s)")

    def on_spellcast_stop(self, *_args) -> SwapResult | None:
        if not self.state.armed:
            return None

        self.debug_msg("SPELLCAST_STOP detected while armed!")
        res = self.executor.swap()
        self.present(res.events)
        if res:
            self.disarm("swap completed")
        else:
            self.error_msg("Swap failed - still armed, fix issue and try again")
        return res

    # ---------- Commande slash ----------

    def handle_slash(self, msg: str | None) -> SwapResult:
        if not msg:
            self.error_msg(f"Usage: {SLASH_COMMAND} <preset> or {SLASH_COMMAND} help")
            return SwapResult.failure(SwapError.EMPTY_NAME)

        cmd = parse_command(msg)
        log.debug("commande %s %s", cmd.name, cmd.args)

        if cmd.name == "save":
            return self._cmd_save(cmd)
        elif cmd.name == "delete":
            name = cmd.arg(0)
            if not name:
                self.error_msg(f"Usage: {SLASH_COMMAND} delete <name>")
                return SwapResult.failure(SwapError.EMPTY_NAME)
            res = self.presets.delete(name)
            self.present(res.events)
            return res
        elif cmd.name == "list":
            res = self.presets.list()
            self.present(res.events)
            return res
        elif cmd.name == "debug":
            self.print_msg("Debug mode: " + _on_off(self.config.toggle_debug()))
            return SwapResult.success(value=self.config.debug)
        elif cmd.name == "sound":
            self.print_msg("Sound: " + _on_off(self.config.toggle_sound()))
            return SwapResult.success(value=self.config.sound)
        elif cmd.name == "status":
            self.present(self.status_lines())
            return SwapResult.success()
        elif cmd.name == "help":
            self.present(self.help_lines())
            return SwapResult.success()
        else:
            return self.arm(cmd.arg(0))

    def _cmd_save(self, cmd: Command) -> SwapResult:
        # /gcdswap save <name> [Item1] [Item2]
        name = cmd.arg(0)
        item1 = clean_item_name(cmd.arg(1))
        item2 = clean_item_name(cmd.arg(2))
        if not name or not item1 or not item2:
            self.error_msg(f"Usage: {SLASH_COMMAND} save <name> [Item1] [Item2]")
            self.error_msg(f"Example: {SLASH_COMMAND} save abc [Aurastone Hammer] [Mace of Unending Life]")
            return SwapResult.failure(SwapError.EMPTY_NAME if not name else SwapError.MISSING_ITEM_ARGUMENT)
        res = self.presets.save(name, item1, item2)
        self.present(res.events)
        return res

    # ---------- Rapports ----------

    def status_lines(self) -> list[ChatEvent]:
        lines = [ChatEvent("Status:"), ChatEvent("  Armed: " + ("YES" if self.state.armed else "NO"))]
        preset = self.state.current_preset
        if preset is not None:
            lines += [
                ChatEvent(f"  Preset Active: {preset.name}"),
                ChatEvent(f"    Item1: {preset.item1}"),
                ChatEvent(f"    Item2: {preset.item2}"),
            ]
        else:
            lines.append(ChatEvent(f"  No preset active (manual: Bag {self.config.bag}, Slot {self.config.slot})"))

        for slot in SWAP_ORDER:
            name = equipped_item_name(self.host, slot)
            lines.append(ChatEvent(f"  {slot.label}: {name or '(empty)'}"))

        lines += [
            ChatEvent("  Debug: " + _on_off(self.config.debug)),
            ChatEvent("  Sound: " + _on_off(self.config.sound)),
        ]
        return lines

    def help_lines(self) -> list[ChatEvent]:
        c = SLASH_COMMAND
        return [ChatEvent(t) for t in (
            "GCDSwap Commands:",
            f"  {c} <preset> - Arm swap with preset",
            f"  {c} save <name> [Item1] [Item2]",
            f"  {c} delete <name>",
            f"  {c} list",
            f"  {c} status",
            f"  {c} debug - Toggle debug",
            f"  {c} sound - Toggle sound",
        )]


def _on_off(flag: bool) -> str:
    return "ON" if flag else "OFF"
