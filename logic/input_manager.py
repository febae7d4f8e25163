"""logic/input_manager.py — Intent-based input layer.

Sits between raw pygame events and game actions.  The scene feeds in
raw events; the manager maps them to *intents* based on the current
**input context** (gameplay or the game-over screen).

Other systems read the intents — they never touch raw keycodes.

Usage (in play_scene):

    self.input = InputManager()
    # each frame:
    self.input.begin_frame()
    for event in events:
        self.input.feed(event)
    self.input.end_frame()          # captures held-key state

    if self.input.just("toggle_debug"):   # discrete press
        ...
    if self.input.held("move_left"):      # continuous hold
        ...
"""

from __future__ import annotations
from enum import Enum, auto
from typing import Sequence
import pygame


# ── Input contexts ──────────────────────────────────────────────────

class InputContext(Enum):
    """Determines which key-bindings are active."""
    GAMEPLAY = auto()   # running level
    UI       = auto()   # game-over modal is up


# ── Intent names ────────────────────────────────────────────────────
# Gameplay:  move_left  move_right  jump
# Both:      toggle_debug  toggle_mute  reload_tuning


# ── Default key bindings ────────────────────────────────────────────

_COMMON_BINDS: dict[str, list[int]] = {
    "toggle_debug":  [pygame.K_F3],
    "toggle_mute":   [pygame.K_m],
    "reload_tuning": [pygame.K_F5],
}

_GAMEPLAY_BINDS: dict[str, list[int]] = {
    # Movement  (held — continuous)
    "move_left":    [pygame.K_LEFT, pygame.K_a],
    "move_right":   [pygame.K_RIGHT, pygame.K_d],
    "jump":         [pygame.K_UP, pygame.K_w, pygame.K_SPACE],
    **_COMMON_BINDS,
}

# Restart is handled by the game-over modal itself
_UI_BINDS: dict[str, list[int]] = dict(_COMMON_BINDS)


# ── InputManager ────────────────────────────────────────────────────

class InputManager:
    """Context-aware input mapper.

    Call ``begin_frame()`` before processing events,
    ``feed(event)`` for each pygame event,
    ``end_frame()`` after all events.

    Then use ``just(intent)`` for discrete presses and
    ``held(intent)`` for continuous holds.
    """

    def __init__(self):
        self.context: InputContext = InputContext.GAMEPLAY
        # Intents pressed *this frame* (rising edge)
        self._pressed: set[str] = set()
        # Intents currently held (key is down right now)
        self._held: set[str] = set()

    # ── frame lifecycle ─────────────────────────────────────────

    def begin_frame(self):
        """Call at the start of each frame before feeding events."""
        self._pressed.clear()

    def feed(self, event: pygame.event.Event):
        """Feed a raw pygame event.  Maps it to intents based on context."""
        if event.type == pygame.KEYDOWN:
            for intent, keys in self._active_binds().items():
                if event.key in keys:
                    self._pressed.add(intent)

    def end_frame(self, keys: Sequence[bool] | None = None):
        """Snapshot held-key state for continuous intents (movement).

        *keys* defaults to ``pygame.key.get_pressed()``; anything
        indexable by key code works.
        """
        self._held.clear()
        if keys is None:
            keys = pygame.key.get_pressed()
        for intent, key_list in self._active_binds().items():
            for key in key_list:
                if keys[key]:
                    self._held.add(intent)
                    break

    # ── queries ─────────────────────────────────────────────────

    def just(self, intent: str) -> bool:
        """True if the intent was triggered this frame (rising edge)."""
        return intent in self._pressed

    def held(self, intent: str) -> bool:
        """True if the intent is continuously held down."""
        return intent in self._held

    def any_pressed(self) -> set[str]:
        """Return all intents pressed this frame."""
        return set(self._pressed)

    # ── internal ────────────────────────────────────────────────

    def _active_binds(self) -> dict[str, list[int]]:
        if self.context == InputContext.GAMEPLAY:
            return _GAMEPLAY_BINDS
        return _UI_BINDS
