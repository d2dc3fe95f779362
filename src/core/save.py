from __future__ import annotations
"""SavedVariables JSON par personnage — format compatible avec l'addon existant.

Contenu sauvegardé:
- bag, slot: cible par défaut du mode manuel
- debug, sound: toggles
- presets: {nom_minuscule: {weapon1, weapon2}}

Remarques:
- `weapon1`/`weapon2` sont les noms historiques des champs, même pour un
  bouclier, un totem ou une relique. On ne les renomme pas.
- Champ absent ou mal typé -> valeur par défaut.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from core.item import normalize_name
from core.preset import Preset
from core.settings import DEFAULT_CONFIG, Config

log = logging.getLogger(__name__)


@dataclass
class SavedVariables:
    config: Config = field(default_factory=DEFAULT_CONFIG)
    presets: dict[str, Preset] = field(default_factory=dict)


# --------------------- utilitaires ---------------------

def _as_int(value, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_bool(value, default: bool) -> bool:
    return value if isinstance(value, bool) else default


# --------------------- API publique ---------------------

def saved_to_dict(saved: SavedVariables) -> dict:
    cfg = saved.config
    return {
        "bag": cfg.bag,
        "slot": cfg.slot,
        "debug": cfg.debug,
        "sound": cfg.sound,
        "presets": {name: p.to_dict() for name, p in saved.presets.items()},
    }


def dict_to_saved(data: dict | None) -> SavedVariables:
    data = data if isinstance(data, dict) else {}
    base = DEFAULT_CONFIG()
    cfg = Config(
        bag=_as_int(data.get("bag"), base.bag),
        slot=_as_int(data.get("slot"), base.slot),
        debug=_as_bool(data.get("debug"), base.debug),
        sound=_as_bool(data.get("sound"), base.sound),
    )

    presets: dict[str, Preset] = {}
    rows = data.get("presets")
    if isinstance(rows, dict):
        for name, row in rows.items():
            if not isinstance(row, dict):
                log.warning("preset %r ignoré: format invalide", name)
                continue
            preset = Preset.from_dict(str(name), row)
            if not preset.name or not preset.item1 or not preset.item2:
                log.warning("preset %r ignoré: champ vide", name)
                continue
            presets[normalize_name(preset.name)] = preset
    return SavedVariables(config=cfg, presets=presets)


# --------------------- helpers fichiers ---------------------

def save_to_file(saved: SavedVariables, path: Path) -> bool:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(saved_to_dict(saved), f, ensure_ascii=False, indent=2)
        log.info("SavedVariables écrites: %s", path)
        return True
    except OSError as e:
        log.error("Échec de sauvegarde %s: %s", path, e)
        return False


def load_from_file(path: Path) -> SavedVariables | None:
    """None si le fichier est absent ou illisible (l'addon repart des défauts)."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        log.info("Pas de SavedVariables pour %s", path)
        return None
    except (OSError, json.JSONDecodeError) as e:
        log.warning("SavedVariables illisibles %s: %s", path, e)
        return None
    return dict_to_saved(data)
