"""components.resources — World-level singletons (not per-entity)."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class GameClock:
    """Monotonic game time: accumulated ``dt`` since the scene started.

    Paused while the game-over screen is up.
    """
    time: float = 0.0


@dataclass
class Score:
    """Star count shown on the HUD.

    ``score`` is what the HUD shows and what bombs deduct from in
    penalty mode.  ``stars_collected`` only ever goes up until a
    restart and drives the bomb cadence.
    """
    score: int = 0
    stars_collected: int = 0
    color_index: int = 0


BOMB_MODES = ("game_over", "penalty")


@dataclass
class GameState:
    over: bool = False
    bomb_mode: str = "game_over"
    bomb_penalty: int = 1
    show_debug: bool = False

    def __post_init__(self):
        if self.bomb_mode not in BOMB_MODES:
            raise ValueError(
                f"unknown bomb_mode {self.bomb_mode!r} (expected one of {BOMB_MODES})")
        if self.bomb_penalty < 0:
            raise ValueError("bomb_penalty must be >= 0")
