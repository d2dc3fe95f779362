from __future__ import annotations
"""Résolution du dossier des SavedVariables (env → dossier utilisateur)."""

from pathlib import Path
import os
import re

from core.settings import ADDON_NAME

ENV_DATA_DIR = "GCDSWAP_DATA_DIR"


def default_data_dir() -> Path:
    # 1) variable d'environnement
    env = os.environ.get(ENV_DATA_DIR)
    if env:
        return Path(env)
    # 2) dossier utilisateur
    return Path.home() / f".{ADDON_NAME}" / "SavedVariables"


def character_file(character: str, data_dir: Path | None = None) -> Path:
    """Un fichier JSON par personnage."""
    base = data_dir if data_dir is not None else default_data_dir()
    safe = re.sub(r"[^\w\-]+", "_", character.strip()) or "default"
    return base / f"{safe}.json"
