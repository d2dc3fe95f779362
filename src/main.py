import argparse
import logging
import os
import sys
from pathlib import Path

from colorama import init

from content.demo_gear import build_demo_inventory
from core.data_paths import character_file, default_data_dir
from core.host import HostEvent
from core.save import SavedVariables, load_from_file, save_to_file
from core.settings import ADDON_NAME
from game.addon import GCDSwapAddon
from ui.console_io import ConsoleHost

log = logging.getLogger("gcdswap")

PROMPT_HELP = "Commandes: /gcdswap ..., /cast (sort instantané), /bags, /quit"


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> logging.Logger:
    """Console (stderr) + fichier optionnel."""
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    return logger


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="GCDSwap - client console de démonstration")
    p.add_argument("--character", default="Elyon", help="personnage (un fichier SavedVariables par perso)")
    p.add_argument("--data-dir", type=Path, default=None, help="dossier des SavedVariables")
    p.add_argument("--log-level", default="WARNING")
    p.add_argument("--log-file", default=None)
    p.add_argument("--no-audio", action="store_true", help="ne pas initialiser pygame.mixer")
    p.add_argument("--volume", type=float, default=1.0, help="volume principal des sons (0.0 - 1.0)")
    return p.parse_args(argv)


def _make_audio(disabled: bool, volume: float = 1.0):
    if disabled:
        return None
    from ui.audio import AudioManager
    project_root = Path(__file__).resolve().parents[1]
    audio = AudioManager(assets_root=project_root / "assets")
    audio.set_master(volume)
    return audio


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    init(autoreset=True)
    setup_logging(args.log_level, args.log_file)

    path = character_file(args.character, args.data_dir or default_data_dir())
    log.info("SavedVariables: %s", path)
    saved = load_from_file(path) or SavedVariables()

    audio = _make_audio(args.no_audio, args.volume)
    host = ConsoleHost(build_demo_inventory(), audio=audio)
    addon = GCDSwapAddon(host, saved)
    addon.install()
    host.fire(HostEvent.ADDON_LOADED, ADDON_NAME)
    host.present_text(PROMPT_HELP)

    try:
        while True:
            try:
                line = input("> ").strip()
            except EOFError:
                break
            if not line:
                continue
            head = line.split()[0].lower()
            if head == "/quit":
                break
            elif head == "/cast":
                host.fire(HostEvent.SPELLCAST_STOP)
            elif head in ("/bags", "/gear"):
                host.show_inventory()
            elif not host.run_slash(line):
                host.present_text(PROMPT_HELP)
    finally:
        # Le client écrit les SavedVariables à la déconnexion
        save_to_file(saved, path)
        if audio is not None:
            audio.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
