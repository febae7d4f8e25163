"""components.spatial — Position, movement, and physics bodies.

All coordinates and dimensions are in pixels.  ``Position`` is the
centre of the entity's body.
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class Position:
    x: float = 0.0        # px
    y: float = 0.0        # px


@dataclass
class Velocity:
    x: float = 0.0        # px/s
    y: float = 0.0        # px/s


@dataclass
class Contact:
    """Which sides of a body are in contact this frame."""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    def reset(self):
        self.up = self.down = self.left = self.right = False


@dataclass
class Body:
    """Axis-aligned arcade body.

    ``width``/``height`` are the *unscaled* size; the live size is
    multiplied by ``scale_x``/``scale_y``.

    ``touching`` is set by collisions with other bodies, ``blocked``
    by the world bounds.  Both are cleared at the start of every
    physics step.
    """
    width: float = 32.0
    height: float = 32.0
    scale_x: float = 1.0
    scale_y: float = 1.0
    bounce_x: float = 0.0
    bounce_y: float = 0.0
    allow_gravity: bool = True
    collide_world_bounds: bool = False
    static: bool = False
    enabled: bool = True
    touching: Contact = field(default_factory=Contact)
    blocked: Contact = field(default_factory=Contact)
    # Centre at the start of the current step (set by the physics system)
    prev_x: float | None = None
    prev_y: float | None = None

    @property
    def w(self) -> float:
        return self.width * self.scale_x

    @property
    def h(self) -> float:
        return self.height * self.scale_y

    @property
    def on_floor(self) -> bool:
        return self.touching.down or self.blocked.down
