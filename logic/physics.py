"""logic/physics.py — Arcade physics.

Rectangular bodies with gravity, bounce, velocity, world-bounds
collision, dynamic-vs-static separation and overlap callbacks.

Usage:
    pw = PhysicsWorld(width=1024, height=640, gravity_y=300)
    world.set_res(pw)
    pw.add_collider(Player, Platform)                  # solid contact
    pw.add_overlap(Player, Star, collect_star)         # callback only

    # each frame
    physics_system(world, dt)

Callbacks are called as ``callback(world, eid_a, eid_b)`` where
``eid_a`` carries the first tag type and ``eid_b`` the second.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, TYPE_CHECKING

from components import Position, Velocity, Body
from core.collision import aabb_of, aabb_overlap, overlap_amounts

if TYPE_CHECKING:
    from core.ecs import World

PairCallback = Callable[["World", int, int], None]

_EPS = 0.01


@dataclass
class _Pair:
    tag_a: type
    tag_b: type
    callback: PairCallback | None = None


class PhysicsWorld:
    """Physics settings + registered collider/overlap pairs (resource)."""

    def __init__(self, width: float, height: float, gravity_y: float = 300.0,
                 rest_speed: float = 20.0, max_dt: float = 0.05):
        self.width = float(width)
        self.height = float(height)
        self.gravity_y = float(gravity_y)
        # A floor rebound slower than this stops the body instead.
        self.rest_speed = float(rest_speed)
        self.max_dt = float(max_dt)
        self.paused = False
        self.colliders: list[_Pair] = []
        self.overlaps: list[_Pair] = []

    def add_collider(self, tag_a: type, tag_b: type,
                     callback: PairCallback | None = None) -> None:
        self.colliders.append(_Pair(tag_a, tag_b, callback))

    def add_overlap(self, tag_a: type, tag_b: type,
                    callback: PairCallback) -> None:
        self.overlaps.append(_Pair(tag_a, tag_b, callback))

    def clear_pairs(self) -> None:
        self.colliders.clear()
        self.overlaps.clear()


# ── Helpers ─────────────────────────────────────────────────────────

def body_aabb(pos: Position, body: Body):
    return aabb_of(pos.x, pos.y, body.w, body.h)


def _rebound(v: float, bounce: float, rest: float = 0.0) -> float:
    r = -v * bounce
    if abs(r) < rest:
        return 0.0
    return r


def set_scale(world: "World", eid: int, sx: float, sy: float) -> None:
    """Resize a body, keeping its bottom edge where it was."""
    body = world.get(eid, Body)
    pos = world.get(eid, Position)
    if body is None or pos is None:
        return
    old_h = body.h
    body.scale_x = sx
    body.scale_y = sy
    pos.y -= (body.h - old_h) * 0.5


def _world_bounds(pw: PhysicsWorld, pos: Position, vel: Velocity, body: Body):
    hw = body.w * 0.5
    hh = body.h * 0.5
    if pos.x - hw < 0.0:
        pos.x = hw
        if vel.x < 0:
            vel.x = _rebound(vel.x, body.bounce_x)
        body.blocked.left = True
    elif pos.x + hw > pw.width:
        pos.x = pw.width - hw
        if vel.x > 0:
            vel.x = _rebound(vel.x, body.bounce_x)
        body.blocked.right = True
    if pos.y - hh < 0.0:
        pos.y = hh
        if vel.y < 0:
            vel.y = _rebound(vel.y, body.bounce_y)
        body.blocked.up = True
    elif pos.y + hh > pw.height:
        pos.y = pw.height - hh
        if vel.y > 0:
            vel.y = _rebound(vel.y, body.bounce_y, pw.rest_speed)
        body.blocked.down = True


def separate(pw: PhysicsWorld, pos: Position, vel: Velocity, body: Body,
             spos: Position, sbody: Body) -> bool:
    """Push a dynamic body out of a static one.  Returns True on contact.

    The side is picked from where the body was at the start of the
    step, so a fast fall onto a thin platform still lands on top.
    """
    a = body_aabb(pos, body)
    b = body_aabb(spos, sbody)
    if not aabb_overlap(a, b):
        return False

    px = pos.x if body.prev_x is None else body.prev_x
    py = pos.y if body.prev_y is None else body.prev_y
    prev = aabb_of(px, py, body.w, body.h)
    hw = body.w * 0.5
    hh = body.h * 0.5

    if prev[3] <= b[1] + _EPS:
        side = "top"
    elif prev[1] >= b[3] - _EPS:
        side = "bottom"
    elif prev[2] <= b[0] + _EPS:
        side = "left"
    elif prev[0] >= b[2] - _EPS:
        side = "right"
    else:
        # Started inside (spawned or grew into it): shortest way out
        ox, oy = overlap_amounts(a, b)
        if oy <= ox:
            side = "top" if pos.y <= spos.y else "bottom"
        else:
            side = "left" if pos.x <= spos.x else "right"

    if side == "top":
        pos.y = b[1] - hh
        if vel.y > 0:
            vel.y = _rebound(vel.y, body.bounce_y, pw.rest_speed)
        body.touching.down = True
        sbody.touching.up = True
    elif side == "bottom":
        pos.y = b[3] + hh
        if vel.y < 0:
            vel.y = _rebound(vel.y, body.bounce_y)
        body.touching.up = True
        sbody.touching.down = True
    elif side == "left":
        pos.x = b[0] - hw
        if vel.x > 0:
            vel.x = _rebound(vel.x, body.bounce_x)
        body.touching.right = True
        sbody.touching.left = True
    else:
        pos.x = b[2] + hw
        if vel.x < 0:
            vel.x = _rebound(vel.x, body.bounce_x)
        body.touching.left = True
        sbody.touching.right = True
    return True


def _members(world: "World", tag: type) -> list[tuple[int, Position, Body]]:
    out = []
    for eid, _, pos, body in world.query(tag, Position, Body):
        if body.enabled:
            out.append((eid, pos, body))
    return out


# ── Systems ─────────────────────────────────────────────────────────

def physics_system(world: "World", dt: float) -> None:
    """Advance every dynamic body one step and resolve contacts."""
    pw = world.res(PhysicsWorld)
    if pw is None or pw.paused:
        return
    dt = min(dt, pw.max_dt)

    # Integrate
    for eid, pos, body in world.query(Position, Body):
        body.touching.reset()
        body.blocked.reset()
        if body.static or not body.enabled:
            continue
        vel = world.get(eid, Velocity)
        if vel is None:
            continue
        body.prev_x = pos.x
        body.prev_y = pos.y
        if body.allow_gravity:
            vel.y += pw.gravity_y * dt
        pos.x += vel.x * dt
        pos.y += vel.y * dt
        if body.collide_world_bounds:
            _world_bounds(pw, pos, vel, body)

    # Solid contacts (dynamic vs static)
    for pair in pw.colliders:
        statics_b = [m for m in _members(world, pair.tag_b) if m[2].static]
        for eid, pos, body in _members(world, pair.tag_a):
            if body.static:
                continue
            vel = world.get(eid, Velocity)
            if vel is None:
                continue
            for sid, spos, sbody in statics_b:
                if separate(pw, pos, vel, body, spos, sbody) and pair.callback:
                    pair.callback(world, eid, sid)

    # Overlaps
    overlap_system(world)


def overlap_system(world: "World") -> None:
    """Fire overlap callbacks for every intersecting registered pair.

    Members removed or disabled by an earlier callback in the same
    pass are skipped; a callback that pauses physics stops the pass.
    """
    pw = world.res(PhysicsWorld)
    if pw is None:
        return
    for pair in pw.overlaps:
        group_b = _members(world, pair.tag_b)
        for eid, pos, body in _members(world, pair.tag_a):
            for oid, opos, obody in group_b:
                if pw.paused:
                    return
                if not (world.alive(eid) and world.alive(oid)):
                    continue
                if not (body.enabled and obody.enabled):
                    continue
                if aabb_overlap(body_aabb(pos, body), body_aabb(opos, obody)):
                    pair.callback(world, eid, oid)
