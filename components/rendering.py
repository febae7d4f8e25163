"""components.rendering — Visual identity and display."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Sprite:
    texture: str = ""                    # AssetStore key
    frame: int = 0
    tint: tuple | None = None            # RGB multiply, None = untinted
    visible: bool = True
    layer: int = 0                       # draw order


@dataclass
class Animator:
    """Playback state for the animation currently on a sprite."""
    current: str = ""
    elapsed: float = 0.0       # seconds since the current frame started
    index: int = 0             # position within the animation's frame list
    finished: bool = False


@dataclass
class HitFlash:
    """Brief visual feedback when the player is hurt."""
    remaining: float = 0.3     # seconds to show flash effect
    color: tuple = (255, 255, 255)
