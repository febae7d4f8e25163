"""components.gameplay — Tag components for the things in the level.

Tags carry no state of their own; physics colliders and overlaps are
registered between tag types (``Player`` vs ``Platform`` etc.).
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Player:
    """Marks the player entity."""
    run_speed: float = 200.0       # px/s
    jump_speed: float = 500.0      # px/s


@dataclass
class Star:
    pass


@dataclass
class Bomb:
    pass


@dataclass
class Platform:
    pass
