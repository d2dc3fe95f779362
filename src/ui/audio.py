from __future__ import annotations
import logging
from pathlib import Path
import pygame

log = logging.getLogger(__name__)


class AudioManager:
    """Charge, met en cache et joue les sons nommés du client (SFX)."""
    def __init__(self, assets_root: Path, sfx_vol: float = 0.8):
        self.assets = assets_root
        self._cache_sfx: dict[str, pygame.mixer.Sound] = {}
        self._missing: set[str] = set()

        self.master = 1.0
        self.sfx_vol = sfx_vol

        self.available = True
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init()
            except pygame.error as e:
                # pas de carte son (CI, ssh...): on joue en silence
                log.warning("mixer indisponible: %s", e)
                self.available = False

    # --- SFX ---
    def _sfx_path(self, name: str) -> str:
        return str(self.assets / "sounds" / f"{name}.ogg")

    def load_sfx(self, name: str) -> pygame.mixer.Sound | None:
        snd = self._cache_sfx.get(name)
        if snd is None and name not in self._missing:
            try:
                snd = pygame.mixer.Sound(self._sfx_path(name))
            except (pygame.error, FileNotFoundError) as e:
                log.warning("son %s introuvable: %s", name, e)
                self._missing.add(name)
                return None
            snd.set_volume(self.master * self.sfx_vol)
            self._cache_sfx[name] = snd
        return snd

    def play_sound(self, name: str):
        if not self.available:
            return
        snd = self.load_sfx(name)
        if snd is None:
            return
        snd.set_volume(self.master * self.sfx_vol)
        snd.play()

    # --- Global ---
    def set_master(self, v: float):
        self.master = max(0.0, min(1.0, v))
        for snd in self._cache_sfx.values():
            snd.set_volume(self.master * self.sfx_vol)

    def quit(self):
        if self.available:
            pygame.mixer.quit()
