"""logic/audio.py — Sound effects and background music.

Keeps a small registry so the rest of the code refers to sounds by key
(``"coinSound"``) instead of juggling paths or ``Sound`` objects.

    bank = SoundBank()
    bank.load("coinSound", "assets/mp3/coin.mp3", volume=0.25)
    bank.play("coinSound")
    bank.loop("bgm")

Everything fails soft: if the mixer can't start or a file is missing,
a note is printed once and the calls become no-ops.
"""

from __future__ import annotations
import os
import pygame

from core.constants import SND_COIN, SND_JUMP, SND_BOMB, SND_BGM
from core.events import EventBus
from core.tuning import section


class SoundBank:
    """Sounds by key (a world resource)."""

    def __init__(self, muted: bool = False):
        self.muted = muted
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self._looping: dict[str, pygame.mixer.Channel | None] = {}
        self._failed_init = False
        self._missing_warned: set[str] = set()
        self.play_counts: dict[str, int] = {}

    # ── mixer ────────────────────────────────────────────────────────

    def ensure_init(self) -> bool:
        """Start pygame.mixer if needed.  Returns True if audio works."""
        if pygame.mixer.get_init() is not None:
            return True
        if self._failed_init:
            return False
        try:
            pygame.mixer.init()
        except pygame.error as ex:
            print(f"[AUDIO] Mixer init failed: {ex} — running silent")
            self._failed_init = True
            return False
        return pygame.mixer.get_init() is not None

    # ── loading ──────────────────────────────────────────────────────

    def load(self, key: str, path: str, volume: float | None = None) -> bool:
        """Load *path* under *key*.  Returns False if it couldn't be loaded."""
        if not os.path.exists(path):
            print(f'[AUDIO] "{path}" not found for "{key}" — sound disabled')
            return False
        if not self.ensure_init():
            return False
        try:
            snd = pygame.mixer.Sound(path)
        except pygame.error as ex:
            print(f'[AUDIO] failed to load "{path}" for "{key}": {ex}')
            return False
        if volume is not None:
            snd.set_volume(max(0.0, min(1.0, float(volume))))
        self._sounds[key] = snd
        return True

    def is_loaded(self, key: str) -> bool:
        return key in self._sounds

    # ── playback ─────────────────────────────────────────────────────

    def play(self, key: str) -> None:
        """Play *key* once on a free channel."""
        self.play_counts[key] = self.play_counts.get(key, 0) + 1
        if self.muted:
            return
        snd = self._sounds.get(key)
        if snd is None:
            if key not in self._missing_warned:
                self._missing_warned.add(key)
                print(f"[AUDIO] sound '{key}' not loaded")
            return
        snd.play()

    def loop(self, key: str) -> None:
        """Start *key* looping forever (background music)."""
        self._looping[key] = None
        if self.muted:
            return
        snd = self._sounds.get(key)
        if snd is not None:
            self._looping[key] = snd.play(loops=-1)

    def stop(self, key: str) -> None:
        self._looping.pop(key, None)
        snd = self._sounds.get(key)
        if snd is not None:
            snd.stop()

    def set_muted(self, muted: bool) -> None:
        """Mute stops loops; unmute restarts them."""
        if muted == self.muted:
            return
        self.muted = muted
        for key in list(self._looping):
            snd = self._sounds.get(key)
            if snd is None:
                continue
            if muted:
                snd.stop()
            else:
                self._looping[key] = snd.play(loops=-1)

    def toggle_mute(self) -> bool:
        self.set_muted(not self.muted)
        print(f"[AUDIO] {'muted' if self.muted else 'unmuted'}")
        return self.muted


# ── Level sounds ────────────────────────────────────────────────────

_DEFAULT_SOUNDS = {
    SND_COIN: ("assets/mp3/Mario coin sfx.mp3", 0.25),
    SND_JUMP: ("assets/mp3/Mario jump sfx.mp3", 0.25),
    SND_BOMB: ("assets/mp3/Small bomb explode sfx.mp3", 0.5),
    SND_BGM:  ("assets/mp3/bgm - Ninja Toad.mp3", 1.0),
}


def load_level_sounds(bank: SoundBank, root: str = ".") -> None:
    """Load the four level sounds using ``[audio.<key>]`` path/volume."""
    for key, (path, volume) in _DEFAULT_SOUNDS.items():
        cfg = section(f"audio.{key}")
        p = os.path.join(root, cfg.get("path", path))
        bank.load(key, p, volume=float(cfg.get("volume", volume)))


def wire_audio(bus: EventBus, bank: SoundBank) -> None:
    """Coin on pickup, jump on jump, bang on bomb hit."""
    bus.subscribe("StarCollected", lambda e: bank.play(SND_COIN))
    bus.subscribe("PlayerJumped", lambda e: bank.play(SND_JUMP))
    bus.subscribe("BombHit", lambda e: bank.play(SND_BOMB))
