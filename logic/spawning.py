"""logic/spawning.py — Level construction and spawners.

Every number comes from ``data/tuning.toml`` with the stock level as
the fallback, so the game builds the same world with no tuning file.

    create_platforms(world)
    player = create_player(world)
    create_star_row(world)
    spawn_star(world)          # one star at a random x along the top
    spawn_bomb(world)          # one bouncing bomb
"""

from __future__ import annotations
import random
from typing import TYPE_CHECKING

from components import (
    Position, Velocity, Body, Sprite, Animator,
    Player, Star, Bomb, Platform, Score,
)
from core.colors import parse_color
from core.constants import (
    TEX_GROUND, TEX_STAR, TEX_BOMB, TEX_PLAYER, ANIM_TURN,
    LAYER_PLATFORM, LAYER_STAR, LAYER_BOMB, LAYER_PLAYER,
)
from core.events import EventBus, BombSpawned
from core.tuning import get as _tun

if TYPE_CHECKING:
    from core.ecs import World


DEFAULT_PLATFORMS = [
    {"x": 400.0, "y": 570.0, "scale": 1.65},   # ground
    {"x": 850.0, "y": 400.0, "scale": 0.65},   # bottom ledge
    {"x": 60.0,  "y": 275.0, "scale": 0.65},   # middle ledge
    {"x": 950.0, "y": 150.0, "scale": 0.65},   # top ledge
]

DEFAULT_COLORS = [0xFF0000, 0xFFA500, 0xFFFF00, 0x00FF00,
                  0x0000FF, 0x4B0082, 0xEE82EE]


def world_width() -> float:
    return float(_tun("game", "width", 1024))


def player_colors() -> list[tuple[int, int, int]]:
    colors = [parse_color(c) for c in _tun("player", "colors", DEFAULT_COLORS)]
    if not colors:
        raise ValueError("player.colors must list at least one colour")
    return colors


def _size(section: str, default: tuple[float, float]) -> tuple[float, float]:
    w, h = _tun(section, "size", list(default))
    return float(w), float(h)


# ── Level ───────────────────────────────────────────────────────────

def create_platforms(world: "World") -> list[int]:
    """Static ground + three ledges.  Returns their entity IDs."""
    base_w, base_h = (float(v) for v in _tun("platforms", "base_size", [400, 32]))
    ids: list[int] = []
    for spec in _tun("platforms", "list", DEFAULT_PLATFORMS):
        scale = float(spec.get("scale", 1.0))
        eid = world.spawn()
        world.add(eid, Position(float(spec["x"]), float(spec["y"])))
        world.add(eid, Body(width=base_w, height=base_h,
                            scale_x=scale, scale_y=scale,
                            allow_gravity=False, static=True))
        world.add(eid, Sprite(texture=TEX_GROUND, layer=LAYER_PLATFORM))
        world.add(eid, Platform())
        ids.append(eid)
    return ids


def create_player(world: "World") -> int:
    sx, sy = _tun("player", "spawn", [100.0, 450.0])
    w, h = _size("player", (32.0, 48.0))
    eid = world.spawn()
    world.add(eid, Position(float(sx), float(sy)))
    world.add(eid, Velocity())
    world.add(eid, Body(width=w, height=h,
                        bounce_x=float(_tun("player", "bounce", 0.2)),
                        bounce_y=float(_tun("player", "bounce", 0.2)),
                        collide_world_bounds=True))
    score = world.res(Score)
    index = score.color_index if score else 0
    colors = player_colors()
    world.add(eid, Sprite(texture=TEX_PLAYER, frame=4,
                          tint=colors[index % len(colors)], layer=LAYER_PLAYER))
    world.add(eid, Animator(current=ANIM_TURN))
    world.add(eid, Player(run_speed=float(_tun("player", "run_speed", 200.0)),
                          jump_speed=float(_tun("player", "jump_speed", 500.0))))
    return eid


def _star_bounce() -> float:
    lo, hi = _tun("stars", "bounce_range", [0.4, 0.8])
    return random.uniform(float(lo), float(hi))


def _make_star(world: "World", x: float, y: float) -> int:
    w, h = _size("stars", (24.0, 22.0))
    eid = world.spawn()
    world.add(eid, Position(x, y))
    world.add(eid, Velocity())
    world.add(eid, Body(width=w, height=h, bounce_y=_star_bounce(),
                        collide_world_bounds=True))
    world.add(eid, Sprite(texture=TEX_STAR, layer=LAYER_STAR))
    world.add(eid, Star())
    return eid


def create_star_row(world: "World") -> list[int]:
    """The opening row: ``count`` stars ``step_x`` apart along the top."""
    count = int(_tun("stars", "count", 11))
    start_x = float(_tun("stars", "start_x", 12.0))
    step_x = float(_tun("stars", "step_x", 70.0))
    return [_make_star(world, start_x + step_x * i, 0.0) for i in range(count)]


def spawn_star(world: "World") -> int:
    """Drop one replacement star from a random point on the top edge."""
    x = random.randint(0, int(world_width()))
    return _make_star(world, float(x), 0.0)


def spawn_bomb(world: "World") -> int:
    """Drop a bomb that bounces forever (bounce 1, world-bounded)."""
    x = random.randint(0, int(world_width()))
    vx_lo, vx_hi = _tun("bombs", "vx_range", [-200, 200])
    w, h = _size("bombs", (14.0, 14.0))
    bounce = float(_tun("bombs", "bounce", 1.0))
    eid = world.spawn()
    world.add(eid, Position(float(x), 0.0))
    world.add(eid, Velocity(float(random.randint(int(vx_lo), int(vx_hi))),
                            float(_tun("bombs", "vy", 20.0))))
    world.add(eid, Body(width=w, height=h, bounce_x=bounce, bounce_y=bounce,
                        collide_world_bounds=True))
    world.add(eid, Sprite(texture=TEX_BOMB, layer=LAYER_BOMB))
    world.add(eid, Bomb())
    bus = world.res(EventBus)
    if bus:
        bus.emit(BombSpawned(eid=eid, x=float(x)))
    return eid


def clear_bombs(world: "World") -> int:
    """Remove every bomb.  Returns how many were removed."""
    n = 0
    for eid, _ in world.all_of(Bomb):
        world.kill(eid)
        n += 1
    return n
