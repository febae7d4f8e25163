"""components — ECS component dataclasses, organised by domain.

Submodules
----------
spatial        Position, Velocity, Body, Contact
rendering      Sprite, Animator, HitFlash
gameplay       Player, Star, Bomb, Platform
resources      GameClock, Score, GameState

All public names are re-exported here so code can do
``from components import Position``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import Position, Velocity, Body, Contact

# ── Rendering ────────────────────────────────────────────────────────
from components.rendering import Sprite, Animator, HitFlash

# ── Gameplay tags ────────────────────────────────────────────────────
from components.gameplay import Player, Star, Bomb, Platform

# ── World resources / singletons ─────────────────────────────────────
from components.resources import GameClock, Score, GameState, BOMB_MODES

__all__ = [
    # spatial
    "Position", "Velocity", "Body", "Contact",
    # rendering
    "Sprite", "Animator", "HitFlash",
    # gameplay
    "Player", "Star", "Bomb", "Platform",
    # resources
    "GameClock", "Score", "GameState", "BOMB_MODES",
]
