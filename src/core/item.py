from __future__ import annotations
"""Noms d'items: extraction depuis un lien du client et normalisation.

Un lien complet ressemble à `|cff0070dd|Hitem:2140:0:0:0|h[Aurastone Hammer]|h|r`.
L'identité d'un item = son nom affiché en minuscules (pas d'item id).
"""

import re

_LINK_NAME = re.compile(r"\|h\[(.*?)\]\|h")
_BRACKET_NAME = re.compile(r"\[(.*?)\]")
_GREEDY_BRACKET_NAME = re.compile(r"\[(.+)\]")


def normalize_name(name: str | None) -> str:
    """Clé de comparaison: minuscules, espaces de bord retirés."""
    return (name or "").strip().lower()


def item_name_from_link(link: str | None) -> str | None:
    """Nom (minuscules) contenu entre crochets dans un lien, ou None."""
    if not link:
        return None
    m = _GREEDY_BRACKET_NAME.search(link)
    return m.group(1).lower() if m else None


def clean_item_name(raw: str | None) -> str | None:
    """Argument de `save` -> nom d'item.

    Ordre: lien complet `|h[Nom]|h`, puis `[Nom]`, puis la chaîne brute.
    """
    if raw is None:
        return None
    m = _LINK_NAME.search(raw) or _BRACKET_NAME.search(raw)
    name = m.group(1) if m else raw
    return name.lower()


def make_item_link(name: str, item_id: int = 0, color: str = "ffffffff") -> str:
    """Fabrique un lien au format du client (utile pour l'inventaire simulé)."""
    return f"|c{color}|Hitem:{item_id}:0:0:0|h[{name}]|h|r"
