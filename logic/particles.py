"""logic/particles.py — Pickup sparkles and bomb debris.

Usage:
    particles = ParticleManager()
    world.set_res(particles)
    wire_particles(bus, particles)      # bursts on pickup / bomb hit

    # In scene update:
    particles.update(dt)

Drawing is handled by scenes/play_draw.draw_particles().
"""

from __future__ import annotations
import math
import random

from core.events import EventBus
from core.tuning import get as _tun


class Particle:
    __slots__ = ("x", "y", "vx", "vy", "life", "max_life", "color", "size", "gravity", "drag")

    def __init__(self, x: float, y: float, vx: float, vy: float, life: float,
                 color: tuple[int, int, int], size: float = 2.0,
                 gravity: float = 0.0, drag: float = 0.98):
        self.x = x
        self.y = y
        self.vx = vx
        self.vy = vy
        self.life = life
        self.max_life = life
        self.color = color
        self.size = size
        self.gravity = gravity
        self.drag = drag

    @property
    def alpha(self) -> float:
        """Remaining life as 0..1, for fading."""
        return max(0.0, self.life / self.max_life) if self.max_life > 0 else 0.0


class ParticleManager:
    """All live particles (a world resource)."""

    def __init__(self, max_particles: int | None = None):
        if max_particles is None:
            max_particles = int(_tun("particles", "max_particles", 256))
        self._particles: list[Particle] = []
        self._max = max_particles

    @property
    def count(self) -> int:
        return len(self._particles)

    @property
    def particles(self) -> list[Particle]:
        return self._particles

    def emit(self, p: Particle):
        if len(self._particles) < self._max:
            self._particles.append(p)

    def emit_burst(self, x: float, y: float, count: int = 8,
                   color: tuple[int, int, int] = (255, 255, 255),
                   speed: float = 120.0, life: float = 0.5, size: float = 2.0,
                   gravity: float = 0.0, drag: float = 0.96):
        """Radial burst at (x, y).

        speed is px/s (randomised ±50 %), life seconds (±30 %),
        gravity px/s².
        """
        for _ in range(count):
            a = random.uniform(0.0, 2 * math.pi)
            s = speed * random.uniform(0.5, 1.5)
            self.emit(Particle(
                x=x, y=y,
                vx=math.cos(a) * s,
                vy=math.sin(a) * s,
                life=life * random.uniform(0.7, 1.3),
                color=color,
                size=size + random.uniform(-0.5, 0.5),
                gravity=gravity,
                drag=drag,
            ))

    def update(self, dt: float):
        alive: list[Particle] = []
        for p in self._particles:
            p.life -= dt
            if p.life <= 0:
                continue
            p.vy += p.gravity * dt
            p.vx *= p.drag
            p.vy *= p.drag
            p.x += p.vx * dt
            p.y += p.vy * dt
            alive.append(p)
        self._particles = alive

    def clear(self):
        self._particles.clear()


def wire_particles(bus: EventBus, pm: ParticleManager) -> None:
    def _sparkle(e):
        pm.emit_burst(e.x, e.y,
                      count=int(_tun("particles", "star_count", 10)),
                      color=(255, 230, 90), speed=90.0, life=0.4)

    def _debris(e):
        pm.emit_burst(e.x, e.y,
                      count=int(_tun("particles", "bomb_count", 24)),
                      color=(255, 120, 30), speed=200.0, life=0.7,
                      size=3.0, gravity=300.0)

    bus.subscribe("StarCollected", _sparkle)
    bus.subscribe("BombHit", _debris)
